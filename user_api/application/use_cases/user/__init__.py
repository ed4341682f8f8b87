from .create_user import CreateUserUseCase
from .list_users import ListUsersUseCase
from .get_user import GetUserUseCase

__all__ = ["CreateUserUseCase", "ListUsersUseCase", "GetUserUseCase"]
