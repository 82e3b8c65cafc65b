from fastapi import HTTPException, Request

from adapter.mongodb.user_repository import MongoUserRepository
from adapter.pubsub.redis_user_notifier import RedisUserNotifier
from port.user_notifier import UserNotifier
from port.user_repository import UserRepository


def _get_db(request: Request):
    """Get the MongoDB database opened at startup, raising 503 if unavailable."""
    db = getattr(request.app.state, 'db', None)
    if db is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return db


def get_user_repo(request: Request) -> UserRepository:
    return MongoUserRepository(_get_db(request))


def get_user_notifier(request: Request) -> UserNotifier:
    # A missing Redis client is tolerated: publishes then fail and are only logged.
    return RedisUserNotifier(getattr(request.app.state, 'redis', None))
