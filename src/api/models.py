"""Pydantic models for API request/response.

Wire field names are camelCase; Python attributes stay snake_case and map
through aliases.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.model.user import PaginatedUsers, User


class UserRequest(BaseModel):
    """Request body for create and update.

    Every field defaults to empty so that presence is checked by the domain
    validity rule rather than by the binder. ``id`` and timestamps sent by
    the client are ignored.
    """
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field('', alias='firstName', examples=['Alice'])
    last_name: str = Field('', alias='lastName', examples=['Tingo'])
    nickname: str = Field('', examples=['atingo'])
    password: str = Field('', examples=['supersecret'])
    email: str = Field('', examples=['atingo@example.com'])
    country: str = Field('', examples=['DE'])

    def to_domain(self) -> User:
        return User(
            first_name=self.first_name,
            last_name=self.last_name,
            nickname=self.nickname,
            password=self.password,
            email=self.email,
            country=self.country,
        )


class UserResponse(BaseModel):
    """Response model for a stored user."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User ID", examples=['ddd50d89-0cf4-4d35-b8e8-51a2b5a06ce4'])
    first_name: str = Field(..., alias='firstName')
    last_name: str = Field(..., alias='lastName')
    nickname: str
    password: str
    email: str
    country: str
    created_at: datetime = Field(..., alias='createdAt')
    updated_at: datetime = Field(..., alias='updatedAt')

    @classmethod
    def from_domain(cls, user: User) -> 'UserResponse':
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            nickname=user.nickname,
            password=user.password,
            email=user.email,
            country=user.country,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PaginatedUsersResponse(BaseModel):
    """Response model for user list with pagination."""
    model_config = ConfigDict(populate_by_name=True)

    total_count: int = Field(..., alias='totalCount', description="Number of users matching the filters")
    total_pages: int = Field(..., alias='totalPages', description="Number of pages for the page size")
    current_page: int = Field(..., alias='currentPage')
    size: int
    has_more: bool = Field(..., alias='hasMore')
    users: list[UserResponse]

    @classmethod
    def from_domain(cls, page: PaginatedUsers) -> 'PaginatedUsersResponse':
        return cls(
            total_count=page.total_count,
            total_pages=page.total_pages,
            current_page=page.current_page,
            size=page.size,
            has_more=page.has_more,
            users=[UserResponse.from_domain(u) for u in page.users],
        )
