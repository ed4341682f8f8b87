from .user_dto import UserCreateRequest, UserResponse
from .error_dto import ErrorResponse, ErrorExampleResponse, ErrorExampleCatalogResponse

__all__ = [
    "UserCreateRequest",
    "UserResponse",
    "ErrorResponse",
    "ErrorExampleResponse",
    "ErrorExampleCatalogResponse",
]
