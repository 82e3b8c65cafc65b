"""Redis pub/sub implementation of UserNotifier.

Each event is a single PUBLISH on its topic channel. Delivery is at most once:
subscribers that are not connected at publish time never see the message.
"""

import logging

import redis
from redis.exceptions import RedisError

from domain.model.errors import PublishError
from domain.model.user import User
from domain.model.user_events import (
    TOPIC_USER_CREATION,
    TOPIC_USER_DELETION,
    TOPIC_USER_UPDATE,
    encode_user,
)

logger = logging.getLogger(__name__)


class RedisUserNotifier:
    def __init__(self, client: redis.Redis | None):
        self.client = client

    def _publish(self, topic: str, payload: str) -> None:
        if self.client is None:
            raise PublishError(f"Redis unavailable, dropping event for {topic}")
        try:
            receivers = self.client.publish(topic, payload)
        except RedisError as e:
            raise PublishError(f"Failed to publish to {topic}") from e
        logger.debug("Published user event", extra={"topic": topic, "receivers": receivers})

    # ── UserNotifier implementation ──────────────────────────

    def notify_user_creation(self, created: User) -> None:
        self._publish(TOPIC_USER_CREATION, encode_user(created))

    def notify_user_update(self, updated: User) -> None:
        self._publish(TOPIC_USER_UPDATE, encode_user(updated))

    def notify_user_deletion(self, deleted_user_id: str) -> None:
        self._publish(TOPIC_USER_DELETION, deleted_user_id)
