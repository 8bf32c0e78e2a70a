# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for registering a new user record"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create and store a new user
        
        Args:
            request: Names, email and password digest
            
        Returns:
            UserResponse with the generated user_id
            
        Raises:
            DuplicateEmailError: If user with email already exists
            ValidationError: If a required field is blank
        """
        saved_user = await self.user_repository.create(
            firstname=request.firstname,
            lastname=request.lastname,
            email=request.email,
            hashed_password=request.hashed_password,
        )
        logger.debug(f"CreateUserUseCase stored {saved_user.user_id}")
        
        # Return DTO
        return UserResponse.from_domain(saved_user)
