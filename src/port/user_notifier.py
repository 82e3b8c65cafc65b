"""Port definition for user event notifications."""

from typing import Protocol

from domain.model.user import User


class UserNotifier(Protocol):
    def notify_user_creation(self, created: User) -> None: ...
    def notify_user_update(self, updated: User) -> None: ...
    def notify_user_deletion(self, deleted_user_id: str) -> None: ...
