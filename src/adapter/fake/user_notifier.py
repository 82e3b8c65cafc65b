"""In-memory implementation of UserNotifier for testing."""

from domain.model.errors import PublishError
from domain.model.user import User
from domain.model.user_events import (
    TOPIC_USER_CREATION,
    TOPIC_USER_DELETION,
    TOPIC_USER_UPDATE,
    encode_user,
)


class FakeUserNotifier:
    def __init__(self, fail: bool = False):
        self.published: list[tuple[str, str]] = []
        self.fail = fail

    def _publish(self, topic: str, payload: str) -> None:
        if self.fail:
            raise PublishError(f"Failed to publish to {topic}")
        self.published.append((topic, payload))

    def notify_user_creation(self, created: User) -> None:
        self._publish(TOPIC_USER_CREATION, encode_user(created))

    def notify_user_update(self, updated: User) -> None:
        self._publish(TOPIC_USER_UPDATE, encode_user(updated))

    def notify_user_deletion(self, deleted_user_id: str) -> None:
        self._publish(TOPIC_USER_DELETION, deleted_user_id)

    def topics(self) -> list[str]:
        return [topic for topic, _ in self.published]
