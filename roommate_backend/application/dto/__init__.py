from .user_dto import UserCreateRequest, UserUpdateRequest, UserResponse

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
]
