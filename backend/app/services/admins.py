"""Administrator management."""
from app.errors import AdminCannotBeDeleted
from app.models.admin import ROLE_SUPER_ADMIN, Admin
from app.repositories.base import AdminRepository
from app.services.passwords import get_password_hash


class AdminService:
    """Thin layer over the admin repository; hashes passwords on the way in."""

    def __init__(self, repository: AdminRepository):
        self.repository = repository

    def list_admins(self, page: int, page_size: int) -> list[Admin]:
        return self.repository.list_page(page, page_size)

    def count_admins(self) -> int:
        return self.repository.count()

    def get_admin(self, admin_id: int) -> Admin:
        return self.repository.get(admin_id)

    def create_admin(self, username: str, password: str, role: str) -> Admin:
        return self.repository.create(username, get_password_hash(password), role)

    def update_admin(self, admin_id: int, username: str, password: str, role: str) -> Admin:
        return self.repository.update(admin_id, username, get_password_hash(password), role)

    def delete_admin(self, admin_id: int) -> None:
        admin = self.repository.get(admin_id)
        if admin.role == ROLE_SUPER_ADMIN:
            raise AdminCannotBeDeleted()
        self.repository.delete(admin_id)

    def search_admins(self, query: str, page: int, page_size: int) -> list[Admin]:
        return self.repository.search(query, page, page_size)

    def count_search_admins(self, query: str) -> int:
        return self.repository.count_search(query)
