from .user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
]
