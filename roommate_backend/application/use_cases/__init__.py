from .users import (
    CreateUserUseCase,
    GetUserUseCase,
    GetUserByEmailUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "GetUserByEmailUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
]
