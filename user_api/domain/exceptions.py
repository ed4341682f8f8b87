"""Domain errors raised by user repositories and use cases"""


class UserError(Exception):
    """Base class for all user domain errors"""


class InvalidUserError(UserError):
    """Raised when a user is missing required data or would break ID uniqueness"""


class UserNotFoundError(UserError):
    """Raised when no user exists with the requested ID"""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserRepositoryError(UserError):
    """Raised when the storage backend fails"""
