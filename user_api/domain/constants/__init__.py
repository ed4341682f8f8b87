"""Constants for domain model field names"""

from .user_fields import UserFields
from .error_examples import ERROR_EXAMPLES, ErrorExample

__all__ = [
    "UserFields",
    "ERROR_EXAMPLES",
    "ErrorExample",
]
