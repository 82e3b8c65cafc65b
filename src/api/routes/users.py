"""User CRUD routes.

- POST   /users            create
- GET    /users            paginated, filtered list
- GET    /users/{userId}   read
- POST   /users/{userId}   update (full replacement of mutable fields)
- DELETE /users/{userId}   delete (idempotent)

Mutations answer the caller first; the matching notification is queued on
BackgroundTasks and published after the response has been sent.
"""

import logging
import uuid

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Response, status

from api.dependencies import get_user_notifier, get_user_repo
from api.errors import ERR_INVALID_BODY
from api.models import PaginatedUsersResponse, UserRequest, UserResponse
from domain.model.errors import NotFoundError, ValidationError
from domain.model.pagination import DEFAULT_SIZE, FIRST_PAGE, MAX_PAGE_VALUE, PaginationOptions
from domain.model.user import UserFilters
from port.user_notifier import UserNotifier
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _parse_user_id(user_id: str) -> str:
    """Canonical UUID string for ``user_id`` or 400."""
    try:
        return str(uuid.UUID(user_id))
    except ValueError:
        logger.info("Invalid user ID", extra={"userId": user_id})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid user ID {user_id}")


def _list_params(
    page: int = Query(FIRST_PAGE, le=MAX_PAGE_VALUE, description="Page to retrieve", examples=[2]),
    size: int = Query(DEFAULT_SIZE, le=MAX_PAGE_VALUE, description="Page size", examples=[3]),
    first_name: str = Query('', alias='firstName', description="FirstName filter"),
    last_name: str = Query('', alias='lastName', description="LastName filter"),
    nickname: str = Query('', description="Nickname filter"),
    email: str = Query('', description="Email filter"),
    country: str = Query('', description="Country filter"),
) -> tuple[PaginationOptions, UserFilters]:
    return (
        PaginationOptions(page=page, size=size),
        UserFilters(first_name=first_name, last_name=last_name, nickname=nickname, email=email, country=country),
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserRequest,
    background_tasks: BackgroundTasks,
    repo: UserRepository = Depends(get_user_repo),
    notifier: UserNotifier = Depends(get_user_notifier),
):
    """Create a new user and insert it in the DB."""
    try:
        created = user_service.create_user(repo, body.to_domain())
    except ValidationError as e:
        logger.info("Rejected user creation", extra={"error": str(e)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERR_INVALID_BODY)

    background_tasks.add_task(user_service.notify_created, notifier, created)
    return UserResponse.from_domain(created)


@router.get("", response_model=PaginatedUsersResponse)
def get_all_users(
    params: tuple[PaginationOptions, UserFilters] = Depends(_list_params),
    repo: UserRepository = Depends(get_user_repo),
):
    """Get a paginated, optionally filtered, list of users."""
    pagination, filters = params
    page = user_service.list_users(repo, pagination, filters)
    return PaginatedUsersResponse.from_domain(page)


@router.get("/{user_id}", response_model=UserResponse)
def get_user_by_id(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Get a user by its id."""
    user_id = _parse_user_id(user_id)
    try:
        user = user_service.get_user(repo, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.from_domain(user)


@router.post("/{user_id}", response_model=UserResponse)
def update_user_by_id(
    user_id: str,
    body: UserRequest,
    background_tasks: BackgroundTasks,
    repo: UserRepository = Depends(get_user_repo),
    notifier: UserNotifier = Depends(get_user_notifier),
):
    """Update a user by its id with the given body data."""
    user_id = _parse_user_id(user_id)
    try:
        updated = user_service.update_user(repo, user_id, body.to_domain())
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logger.info("Rejected user update", extra={"userId": user_id, "error": str(e)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERR_INVALID_BODY)

    background_tasks.add_task(user_service.notify_updated, notifier, updated)
    return UserResponse.from_domain(updated)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_by_id(
    user_id: str,
    background_tasks: BackgroundTasks,
    repo: UserRepository = Depends(get_user_repo),
    notifier: UserNotifier = Depends(get_user_notifier),
):
    """Delete a user by its id. Absent users are not an error."""
    user_id = _parse_user_id(user_id)
    user_service.delete_user(repo, user_id)

    background_tasks.add_task(user_service.notify_deleted, notifier, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
