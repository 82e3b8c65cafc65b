"""In-memory implementation of UserRepository for testing."""

import uuid
from dataclasses import asdict, replace
from datetime import datetime, timezone

from domain.model.errors import NotFoundError
from domain.model.pagination import PaginationOptions, paginate
from domain.model.user import PaginatedUsers, User, UserFilters


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    @staticmethod
    def _matches(user: User, query: dict) -> bool:
        doc = asdict(user)
        return all(doc.get(key) == value for key, value in query.items())

    # ── write operations ─────────────────────────────────────

    def create(self, user: User) -> User:
        now = datetime.now(timezone.utc)
        user = replace(user, id=str(uuid.uuid4()), created_at=now, updated_at=now)
        self.store[user.id] = replace(user)
        return user

    def update(self, user: User) -> User:
        if user.id not in self.store:
            raise NotFoundError("User", user.id)

        self.store[user.id] = replace(user, updated_at=datetime.now(timezone.utc))
        return self.get_by_id(user.id)

    def delete_by_id(self, user_id: str) -> None:
        self.store.pop(user_id, None)

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, user_id: str) -> User:
        user = self.store.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return replace(user)

    def get_paginated_users(self, pagination: PaginationOptions, filters: UserFilters) -> PaginatedUsers:
        opts = pagination.normalized()
        query = filters.to_query()

        matched = [u for u in self.store.values() if self._matches(u, query)]
        matched.sort(key=lambda u: (u.created_at, u.id))
        total_count = len(matched)

        users = []
        if opts.skip < total_count:
            users = [replace(u) for u in matched[opts.skip:opts.skip + opts.limit]]

        page = paginate(total_count, opts)
        return PaginatedUsers(
            total_count=page.total_count,
            total_pages=page.total_pages,
            current_page=page.current_page,
            size=page.size,
            has_more=page.has_more,
            users=users,
        )
