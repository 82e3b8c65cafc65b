"""MongoDB index management for the users collection.

Indexes are declared as ``(name, keys)`` pairs and reconciled against what the
server already has: an index with the wanted name but another key spec, or the
wanted key spec under another name, is dropped before the wanted one is built.
"""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)

# Listing order is created_at then _id; the rest back the equality filters.
USER_INDEXES = (
    ('idx_users_created_at', [('created_at', 1), ('_id', 1)]),
    ('idx_users_email', [('email', 1)]),
    ('idx_users_country', [('country', 1)]),
    ('idx_users_name', [('last_name', 1), ('first_name', 1)]),
)


def _conflicting(existing: dict, name: str, keys: list) -> list[str]:
    wanted = list(keys)
    stale = []
    for idx_name, info in existing.items():
        if idx_name == '_id_':
            continue
        idx_keys = [tuple(k) for k in info.get('key', [])]
        if (idx_name == name) != (idx_keys == wanted):
            stale.append(idx_name)
    return stale


def ensure_index(collection, name: str, keys: list) -> bool:
    """Create ``name`` on ``keys`` unless an identical index already exists.

    Returns True when the index was created or rebuilt, False when it was
    already in place.
    """
    existing = collection.index_information()
    if name in existing and [tuple(k) for k in existing[name].get('key', [])] == list(keys):
        return False

    for stale in _conflicting(existing, name, keys):
        logger.warning("Dropping conflicting index", extra={"index": stale, "wanted": name})
        collection.drop_index(stale)

    collection.create_index(keys, name=name)
    logger.info("Created index", extra={"index": name})
    return True


def ensure_user_indexes(collection) -> bool:
    """Reconcile every users index. Returns False if the server refused any."""
    try:
        for name, keys in USER_INDEXES:
            ensure_index(collection, name, keys)
    except PyMongoError as e:
        logger.error("Failed to create users indexes", extra={"error": str(e)})
        return False
    return True


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.user_repository import MongoUserRepository

    return MongoUserRepository(db).ensure_indexes()
