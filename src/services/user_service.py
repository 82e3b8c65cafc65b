"""User service: validation and sequencing for user CRUD.

Flow for every mutation: validate → storage → caller schedules notification.
Notification is not sent from here; callers hand the returned user to
``dispatch_notification`` on a background task once the response is on its way.
"""

import logging
from typing import Callable

from domain.model.errors import PublishError, ValidationError
from domain.model.pagination import PaginationOptions
from domain.model.user import PaginatedUsers, User, UserFilters
from port.user_notifier import UserNotifier
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _ensure_valid(user: User) -> None:
    if not user.is_valid():
        raise ValidationError(f"Missing required fields: {', '.join(user.missing_fields())}")


def create_user(repo: UserRepository, user: User) -> User:
    """Validate and persist a new user.

    Raises ValidationError before touching storage if a required field is empty.
    """
    _ensure_valid(user)
    return repo.create(user)


def get_user(repo: UserRepository, user_id: str) -> User:
    return repo.get_by_id(user_id)


def list_users(repo: UserRepository, pagination: PaginationOptions, filters: UserFilters) -> PaginatedUsers:
    return repo.get_paginated_users(pagination, filters)


def update_user(repo: UserRepository, user_id: str, incoming: User) -> User:
    """Merge ``incoming`` into the stored user, validate, then persist.

    Every mutable field is taken from ``incoming``, so fields left empty in the
    request are emptied and the merged record fails validation.

    Raises:
        NotFoundError: no user with ``user_id``.
        ValidationError: the merged record is missing required fields.
    """
    existing = repo.get_by_id(user_id)
    existing.modify(incoming)
    _ensure_valid(existing)
    return repo.update(existing)


def delete_user(repo: UserRepository, user_id: str) -> None:
    repo.delete_by_id(user_id)


# ── notifications ────────────────────────────────────────────


def dispatch_notification(notify: Callable, payload, event: str) -> None:
    """Run one notifier call, logging and discarding any publish failure.

    Meant to run detached from the request (e.g. FastAPI BackgroundTasks):
    the mutation is already committed and acknowledged, so a failure here is
    only observable in the logs. No retry.
    """
    try:
        notify(payload)
    except PublishError as e:
        logger.error("Could not notify user event", extra={"event": event, "error": str(e)})
        return
    logger.debug("User event notified", extra={"event": event})


def notify_created(notifier: UserNotifier, user: User) -> None:
    dispatch_notification(notifier.notify_user_creation, user, 'creation')


def notify_updated(notifier: UserNotifier, user: User) -> None:
    dispatch_notification(notifier.notify_user_update, user, 'update')


def notify_deleted(notifier: UserNotifier, user_id: str) -> None:
    dispatch_notification(notifier.notify_user_deletion, user_id, 'deletion')
