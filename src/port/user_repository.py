from typing import Protocol

from domain.model.pagination import PaginationOptions
from domain.model.user import PaginatedUsers, User, UserFilters


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations raise ``NotFoundError`` for absent ids and ``StorageError``
    for any other storage failure.
    """
    def create(self, user: User) -> User:
        """Persist a new user with a server-assigned id and timestamps."""
        ...

    def get_by_id(self, user_id: str) -> User:
        """Find a user by ID."""
        ...

    def update(self, user: User) -> User:
        """Replace the stored user and return the re-read record."""
        ...

    def delete_by_id(self, user_id: str) -> None:
        """Remove the user. Succeeds when nothing matched."""
        ...

    def get_paginated_users(self, pagination: PaginationOptions, filters: UserFilters) -> PaginatedUsers:
        """Return one page of users matching the filters."""
        ...
