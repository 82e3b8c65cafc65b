import logging

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, PyMongoError

from domain.model.errors import StorageError
from utils.config import Settings

logger = logging.getLogger(__name__)

USERS_COLLECTION_NAME = 'users'


def create_mongodb_client(settings: Settings) -> MongoClient:
    """Create a MongoDB client and verify it with a ping.

    The client is meant to be created once at process start and closed at
    shutdown with :func:`close_mongodb_client`. Every operation issued through
    it is bounded by ``settings.mongo_timeout_ms``.

    Raises:
        StorageError: if the server cannot be reached.
    """
    try:
        client = MongoClient(
            settings.mongo_url,
            uuidRepresentation='standard',
            tz_aware=True,
            timeoutMS=settings.mongo_timeout_ms,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            connectTimeoutMS=settings.mongo_timeout_ms,
            maxPoolSize=50,
            retryWrites=True,
            retryReads=True,
        )
        client.admin.command('ping')
    except (ConnectionFailure, PyMongoError) as e:
        logger.error("[MONGODB] Connection failed", extra={"error": str(e)[:200]})
        raise StorageError("MongoDB unavailable") from e

    logger.info("[MONGODB] Connected successfully", extra={"database": settings.mongo_database})
    return client


def get_database(client: MongoClient, settings: Settings) -> Database:
    return client[settings.mongo_database]


def close_mongodb_client(client: MongoClient | None) -> None:
    if client is None:
        return
    client.close()
    logger.info("[MONGODB] Connection closed")
