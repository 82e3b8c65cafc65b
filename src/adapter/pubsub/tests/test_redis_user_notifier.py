"""Tests for RedisUserNotifier and the Redis connection helpers."""

import json
import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from redis.exceptions import ConnectionError as RedisConnectionError

from adapter.pubsub.connection import close_redis_client, create_redis_client
from adapter.pubsub.redis_user_notifier import RedisUserNotifier
from domain.model.errors import PublishError
from domain.model.user import User
from utils.config import Settings


def _make_user() -> User:
    ts = datetime(2024, 5, 1, 8, 30, 0, tzinfo=timezone.utc)
    return User(
        id="5cace01f-45c3-49f0-a725-c22866874095",
        first_name="Alice", last_name="Tingo", nickname="atingo",
        password="pw", email="a@example.com", country="DE",
        created_at=ts, updated_at=ts,
    )


class TestRedisUserNotifier(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock()
        self.client.publish.return_value = 1
        self.notifier = RedisUserNotifier(self.client)

    def test_creation_publishes_user_json(self):
        user = _make_user()
        self.notifier.notify_user_creation(user)

        topic, payload = self.client.publish.call_args[0]
        self.assertEqual(topic, "user-created")
        self.assertEqual(json.loads(payload), user.to_dict())

    def test_update_publishes_user_json(self):
        user = _make_user()
        self.notifier.notify_user_update(user)

        topic, payload = self.client.publish.call_args[0]
        self.assertEqual(topic, "user-updated")
        self.assertEqual(json.loads(payload)["password"], "pw")

    def test_deletion_publishes_bare_id(self):
        self.notifier.notify_user_deletion("5cace01f-45c3-49f0-a725-c22866874095")
        self.client.publish.assert_called_once_with("user-deleted", "5cace01f-45c3-49f0-a725-c22866874095")

    def test_redis_error_becomes_publish_error(self):
        self.client.publish.side_effect = RedisConnectionError("gone")
        with self.assertRaises(PublishError):
            self.notifier.notify_user_deletion("x")

    def test_missing_client_raises_publish_error(self):
        with self.assertRaises(PublishError):
            RedisUserNotifier(None).notify_user_creation(_make_user())


class TestRedisConnection(unittest.TestCase):

    @patch('adapter.pubsub.connection.redis.from_url')
    def test_create_client_pings_and_applies_timeouts(self, mock_from_url):
        client = MagicMock()
        mock_from_url.return_value = client
        settings = Settings(redis_url="redis://cache:6379/1", redis_timeout_seconds=1.5)

        result = create_redis_client(settings)

        self.assertIs(result, client)
        client.ping.assert_called_once()
        kwargs = mock_from_url.call_args.kwargs
        self.assertEqual(mock_from_url.call_args[0][0], "redis://cache:6379/1")
        self.assertEqual(kwargs["socket_timeout"], 1.5)
        self.assertTrue(kwargs["decode_responses"])

    @patch('adapter.pubsub.connection.redis.from_url')
    def test_create_client_failure_raises_publish_error(self, mock_from_url):
        mock_from_url.return_value.ping.side_effect = RedisConnectionError("refused")
        with self.assertRaises(PublishError):
            create_redis_client(Settings())

    def test_close_handles_none(self):
        close_redis_client(None)

    def test_close_closes_client(self):
        client = MagicMock()
        close_redis_client(client)
        client.close.assert_called_once()


if __name__ == '__main__':
    unittest.main()
