"""Admin management API endpoints (super admins only)."""
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import Pagination, get_admin_service, require_roles
from app.models.admin import ROLE_SUPER_ADMIN
from app.schemas.admin import AdminCreate, AdminListResponse, AdminResponse, AdminUpdate
from app.schemas.common import MessageResponse
from app.services.admins import AdminService
from app.services.pagination import PageInfo

router = APIRouter(
    prefix="/admin",
    tags=["admins"],
    dependencies=[Depends(require_roles(ROLE_SUPER_ADMIN))],
)


@router.get("", response_model=AdminListResponse)
def list_admins(
    pagination: Pagination = Depends(),
    admins: AdminService = Depends(get_admin_service),
):
    """List admins page by page."""
    items = admins.list_admins(pagination.page, pagination.page_size)
    page_info = PageInfo.build(pagination.page, pagination.page_size, admins.count_admins())
    return AdminListResponse(admins=[AdminResponse.model_validate(a) for a in items], **asdict(page_info))


@router.get("/search", response_model=AdminListResponse)
def search_admins(
    q: str = "",
    pagination: Pagination = Depends(),
    admins: AdminService = Depends(get_admin_service),
):
    """Search admins by username or role."""
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required",
        )

    items = admins.search_admins(q, pagination.page, pagination.page_size)
    page_info = PageInfo.build(pagination.page, pagination.page_size, admins.count_search_admins(q))
    return AdminListResponse(admins=[AdminResponse.model_validate(a) for a in items], **asdict(page_info))


@router.get("/{admin_id}", response_model=AdminResponse)
def get_admin(admin_id: int, admins: AdminService = Depends(get_admin_service)):
    """Get a single admin."""
    return admins.get_admin(admin_id)


@router.post("", response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
def create_admin(data: AdminCreate, admins: AdminService = Depends(get_admin_service)):
    """Create an admin."""
    return admins.create_admin(data.username, data.password, data.role)


@router.put("/{admin_id}", response_model=AdminResponse)
def update_admin(
    admin_id: int,
    data: AdminUpdate,
    admins: AdminService = Depends(get_admin_service),
):
    """Replace an admin's username, password and role."""
    return admins.update_admin(admin_id, data.username, data.password, data.role)


@router.delete("/{admin_id}", response_model=MessageResponse)
def delete_admin(admin_id: int, admins: AdminService = Depends(get_admin_service)):
    """Delete an admin. Super admins cannot be deleted."""
    admins.delete_admin(admin_id)
    return MessageResponse(message="Admin deleted successfully")
