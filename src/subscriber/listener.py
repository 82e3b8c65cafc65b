"""User event listener - subscriber service core logic.

Subscribes to every user topic and logs each decoded event:

    API → PUBLISH user-created / user-updated / user-deleted → Redis → listener

Deletion events carry a bare user id; the others carry the full user JSON.
"""

import json
import logging
from typing import Callable, Iterable

from domain.model.user import User
from domain.model.user_events import all_user_topics, decode_user_event

logger = logging.getLogger(__name__)


def handle_message(message: dict) -> User | str | None:
    """Decode one pub/sub message.

    Returns the decoded payload, or None for subscription confirmations and
    undecodable payloads (which are logged and skipped).
    """
    if message.get('type') != 'message':
        return None

    topic = message.get('channel')
    if isinstance(topic, bytes):
        topic = topic.decode('utf-8')

    try:
        payload = decode_user_event(topic, message.get('data'))
    except (ValueError, TypeError, AttributeError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error("Error decoding payload", extra={"topic": topic, "error": str(e)})
        return None

    if isinstance(payload, User):
        logger.info("Received user event", extra={"topic": topic, "userId": payload.id, "user": payload.to_dict()})
    else:
        logger.info("Received user event", extra={"topic": topic, "userId": payload})
    return payload


def run_listener_loop(messages: Iterable[dict], on_event: Callable | None = None) -> int:
    """Consume messages until the iterable is exhausted.

    Args:
        messages: pub/sub messages, e.g. ``pubsub.listen()``
        on_event: optional callback receiving ``(topic, payload)`` for each decoded event

    Returns:
        Number of events decoded
    """
    handled = 0
    for message in messages:
        payload = handle_message(message)
        if payload is None:
            continue
        handled += 1
        if on_event is not None:
            topic = message['channel']
            on_event(topic.decode('utf-8') if isinstance(topic, bytes) else topic, payload)
    return handled


def subscribe_all(client):
    """Return a PubSub subscribed to every user topic."""
    pubsub = client.pubsub()
    pubsub.subscribe(*all_user_topics())
    logger.info("Subscribed to user topics", extra={"topics": all_user_topics()})
    return pubsub
