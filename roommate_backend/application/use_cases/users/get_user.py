# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for fetching a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.get_by_id(user_id)
        return UserResponse.from_domain(user)


class GetUserByEmailUseCase:
    """Use case for fetching a user by email address"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, email: str) -> UserResponse:
        user = await self.user_repository.get_by_email(email)
        return UserResponse.from_domain(user)
