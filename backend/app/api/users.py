"""End user management API endpoints."""
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import Pagination, get_user_service, require_roles
from app.models.admin import ROLES
from app.schemas.common import MessageResponse
from app.schemas.user import UserCreate, UserListResponse, UserResponse, UserUpdate
from app.services.pagination import PageInfo
from app.services.users import UserService

router = APIRouter(
    prefix="/user",
    tags=["users"],
    dependencies=[Depends(require_roles(*ROLES))],
)


@router.get("", response_model=UserListResponse)
def list_users(
    pagination: Pagination = Depends(),
    users: UserService = Depends(get_user_service),
):
    """List users page by page."""
    items = users.list_users(pagination.page, pagination.page_size)
    page_info = PageInfo.build(pagination.page, pagination.page_size, users.count_users())
    return UserListResponse(users=[UserResponse.model_validate(u) for u in items], **asdict(page_info))


@router.get("/search", response_model=UserListResponse)
def search_users(
    q: str = "",
    pagination: Pagination = Depends(),
    users: UserService = Depends(get_user_service),
):
    """Search users by name, phone number or email."""
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required",
        )

    items = users.search_users(q, pagination.page, pagination.page_size)
    page_info = PageInfo.build(pagination.page, pagination.page_size, users.count_search_users(q))
    return UserListResponse(users=[UserResponse.model_validate(u) for u in items], **asdict(page_info))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    """Get a single user."""
    return users.get_user(user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, users: UserService = Depends(get_user_service)):
    """Create a user."""
    return users.create_user(**data.model_dump())


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    data: UserUpdate,
    users: UserService = Depends(get_user_service),
):
    """Update a user's profile fields."""
    return users.update_user(user_id, **data.model_dump())


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    """Delete a user."""
    users.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")


@router.post("/{user_id}/block", response_model=MessageResponse)
def block_user(user_id: int, users: UserService = Depends(get_user_service)):
    """Block a user."""
    users.block_user(user_id)
    return MessageResponse(message="User blocked successfully")


@router.post("/{user_id}/unblock", response_model=MessageResponse)
def unblock_user(user_id: int, users: UserService = Depends(get_user_service)):
    """Unblock a user."""
    users.unblock_user(user_id)
    return MessageResponse(message="User unblocked successfully")
