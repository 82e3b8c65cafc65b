#!/usr/bin/env python
"""Subscriber service entry point."""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import redis
from redis.exceptions import RedisError

from subscriber.listener import run_listener_loop, subscribe_all
from utils.config import Settings
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the subscriber service."""
    settings = Settings.from_env()
    setup_structured_logging(settings.log_level, service="users-subscriber")
    logger.info("Starting users subscriber...")

    # No socket timeout here: listen() blocks until the next message
    client = redis.from_url(settings.redis_url, decode_responses=True)
    pubsub = None
    try:
        pubsub = subscribe_all(client)
        run_listener_loop(pubsub.listen())
    except KeyboardInterrupt:
        logger.info("Subscriber stopped")
    except RedisError as e:
        logger.error(f"Fatal Redis error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        if pubsub is not None:
            pubsub.close()
        client.close()


if __name__ == "__main__":
    main()
