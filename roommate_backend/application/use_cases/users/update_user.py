# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserUpdateRequest, UserResponse


class UpdateUserUseCase:
    """Use case for changing fields of an existing user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Apply the fields set on the request
        
        Args:
            user_id: ID of the user to change
            request: Partial update; unset fields are left alone
            
        Returns:
            UserResponse with the stored values after the update
            
        Raises:
            NotFoundError: If the user does not exist
            DuplicateEmailError: If the new email belongs to another user
            ValidationError: If a field is explicitly set to null or blank
        """
        fields = request.model_dump(exclude_unset=True)
        user = await self.user_repository.update(user_id, fields)
        return UserResponse.from_domain(user)
