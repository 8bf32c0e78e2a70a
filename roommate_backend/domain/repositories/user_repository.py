from abc import ABC, abstractmethod
from typing import Any, List, Mapping

from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    async def create(
        self,
        firstname: str,
        lastname: str,
        email: str,
        hashed_password: str,
    ) -> User:
        """
        Build a new user and persist it

        Args:
            firstname: First name
            lastname: Last name
            email: Email address, unique across all users
            hashed_password: Password digest

        Returns:
            The stored User with its generated user_id

        Raises:
            ValidationError: If a field is missing or empty
            DuplicateEmailError: If the email is already taken
        """
        user = User(firstname=firstname, lastname=lastname, email=email)
        user.set_hashed_password(hashed_password)
        return await self.add(user)

    @abstractmethod
    async def add(self, user: User) -> User:
        """Persist a complete, not yet stored user and assign its ID"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User:
        """Find user by ID, raising NotFoundError if absent"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> User:
        """Find user by email address, raising NotFoundError if absent"""
        pass

    @abstractmethod
    async def update(self, user_id: str, fields: Mapping[str, Any]) -> User:
        """Apply field changes to an existing user"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Remove a user, raising NotFoundError if absent"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """Return every stored user, in no particular order"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def exists_by_id(self, user_id: str) -> bool:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass
