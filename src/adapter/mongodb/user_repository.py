"""MongoDB implementation of UserRepository."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from logging import getLogger

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.errors import NotFoundError, StorageError
from domain.model.pagination import PaginationOptions, paginate
from domain.model.user import PaginatedUsers, User, UserFilters

logger = getLogger(__name__)

# Stable page order: insertion time, then id for ties
_SORT = [('created_at', ASCENDING), ('_id', ASCENDING)]


def _storage_now() -> datetime:
    """Current UTC time truncated to BSON datetime precision (milliseconds)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import ensure_user_indexes

        return ensure_user_indexes(self.collection)

    # ── helpers ──────────────────────────────────────────────

    @staticmethod
    def _to_document(user: User) -> dict:
        return {
            '_id': user.id,
            'first_name': user.first_name,
            'last_name': user.last_name,
            'nickname': user.nickname,
            'password': user.password,
            'email': user.email,
            'country': user.country,
            'created_at': user.created_at,
            'updated_at': user.updated_at,
        }

    @staticmethod
    def _to_domain(doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            first_name=doc.get('first_name', ''),
            last_name=doc.get('last_name', ''),
            nickname=doc.get('nickname', ''),
            password=doc.get('password', ''),
            email=doc.get('email', ''),
            country=doc.get('country', ''),
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
        )

    # ── write operations ─────────────────────────────────────

    def create(self, user: User) -> User:
        """Insert a new user, overriding any caller-supplied id and timestamps."""
        now = _storage_now()
        user = replace(user, id=str(uuid.uuid4()), created_at=now, updated_at=now)

        try:
            self.collection.insert_one(self._to_document(user))
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"userId": user.id, "error": str(e)})
            raise StorageError("Failed to create user") from e

        logger.info("User created", extra={"userId": user.id})
        return user

    def update(self, user: User) -> User:
        """Replace the stored document and return what storage now holds."""
        user = replace(user, updated_at=_storage_now())

        try:
            result = self.collection.replace_one({'_id': user.id}, self._to_document(user))
        except PyMongoError as e:
            logger.error("Failed to update user", extra={"userId": user.id, "error": str(e)})
            raise StorageError("Failed to update user") from e

        if result.matched_count == 0:
            logger.warning("User not found for update", extra={"userId": user.id})
            raise NotFoundError("User", user.id)

        logger.info("User updated", extra={"userId": user.id})
        return self.get_by_id(user.id)

    def delete_by_id(self, user_id: str) -> None:
        """Hard delete. Deleting an absent id is not an error."""
        try:
            result = self.collection.delete_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to delete user", extra={"userId": user_id, "error": str(e)})
            raise StorageError("Failed to delete user") from e

        logger.info("User deleted", extra={"userId": user_id, "deletedCount": result.deleted_count})

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, user_id: str) -> User:
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            raise StorageError("Failed to get user") from e

        if not doc:
            raise NotFoundError("User", user_id)
        return self._to_domain(doc)

    def get_paginated_users(self, pagination: PaginationOptions, filters: UserFilters) -> PaginatedUsers:
        """List users matching ``filters``, one page at a time.

        Count and find share the same compiled predicate. When the requested
        page starts past the last document the find is not issued and the page
        comes back empty, with the envelope still computed from the requested
        page.
        """
        opts = pagination.normalized()
        query = filters.to_query()

        try:
            total_count = self.collection.count_documents(query)

            docs = []
            if opts.skip < total_count:
                docs = self.collection.find(query).sort(_SORT).skip(opts.skip).limit(opts.limit)
            users = [self._to_domain(doc) for doc in docs]
        except (PyMongoError, KeyError) as e:
            logger.error("Failed to list users", extra={"error": str(e), "errorType": type(e).__name__})
            raise StorageError("Failed to list users") from e

        page = paginate(total_count, opts)
        logger.info("Listed users", extra={"count": len(users), "total": total_count, "page": page.current_page})
        return PaginatedUsers(
            total_count=page.total_count,
            total_pages=page.total_pages,
            current_page=page.current_page,
            size=page.size,
            has_more=page.has_more,
            users=users,
        )
