"""User event topics and their payload contract.

Creation and update topics carry the JSON-encoded user record. The deletion
topic carries the bare user id, not JSON-wrapped.
"""

import json

from domain.model.user import User

TOPIC_USER_UPDATE = 'user-updated'
TOPIC_USER_CREATION = 'user-created'
TOPIC_USER_DELETION = 'user-deleted'


def all_user_topics() -> list[str]:
    """All user topics, for subscribers that want every event."""
    return [TOPIC_USER_UPDATE, TOPIC_USER_CREATION, TOPIC_USER_DELETION]


def encode_user(user: User) -> str:
    return json.dumps(user.to_dict())


def decode_user_event(topic: str, payload: str | bytes) -> User | str:
    """Decode a message received on one of the user topics.

    Returns the deleted user's id for the deletion topic and a ``User`` for
    the others. Raises ``ValueError`` for unknown topics and
    ``json.JSONDecodeError`` for malformed user payloads.
    """
    if isinstance(payload, bytes):
        payload = payload.decode('utf-8')

    if topic == TOPIC_USER_DELETION:
        return payload
    if topic in (TOPIC_USER_CREATION, TOPIC_USER_UPDATE):
        return User.from_dict(json.loads(payload))
    raise ValueError(f"Unknown user topic: {topic}")
