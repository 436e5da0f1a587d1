"""End user management."""
from datetime import date

from app.errors import InvalidPhoneNumber
from app.models.user import User
from app.repositories.base import UserRepository

PHONE_NUMBER_PREFIX = "+993"
PHONE_NUMBER_LENGTH = 12


def is_valid_phone_number(phone_number: str) -> bool:
    """Accept only +993 numbers with eight subscriber digits."""
    return (
        len(phone_number) == PHONE_NUMBER_LENGTH
        and phone_number.startswith(PHONE_NUMBER_PREFIX)
        and phone_number[1:].isascii()
        and phone_number[1:].isdigit()
    )


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def list_users(self, page: int, page_size: int) -> list[User]:
        return self.repository.list_page(page, page_size)

    def count_users(self) -> int:
        return self.repository.count()

    def get_user(self, user_id: int) -> User:
        return self.repository.get(user_id)

    def create_user(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        gender: str | None = None,
        date_of_birth: date | None = None,
        location: str | None = None,
        email: str | None = None,
        profile_photo_url: str | None = None,
    ) -> User:
        if not is_valid_phone_number(phone_number):
            raise InvalidPhoneNumber()
        return self.repository.create(
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            gender=gender,
            date_of_birth=date_of_birth,
            location=location,
            email=email,
            profile_photo_url=profile_photo_url,
        )

    def update_user(
        self,
        user_id: int,
        first_name: str,
        last_name: str,
        gender: str | None = None,
        date_of_birth: date | None = None,
        location: str | None = None,
        email: str | None = None,
        profile_photo_url: str | None = None,
    ) -> User:
        return self.repository.update(
            user_id,
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            date_of_birth=date_of_birth,
            location=location,
            email=email,
            profile_photo_url=profile_photo_url,
        )

    def delete_user(self, user_id: int) -> None:
        self.repository.delete(user_id)

    def block_user(self, user_id: int) -> None:
        self.repository.set_blocked(user_id, True)

    def unblock_user(self, user_id: int) -> None:
        self.repository.set_blocked(user_id, False)

    def search_users(self, query: str, page: int, page_size: int) -> list[User]:
        return self.repository.search(query, page, page_size)

    def count_search_users(self, query: str) -> int:
        return self.repository.count_search(query)
