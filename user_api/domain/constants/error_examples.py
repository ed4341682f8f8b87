"""Catalog of the demonstration error endpoints"""

# Standard library imports
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ErrorExample:
    code: str
    name: str
    endpoint: str  # Sample URL that triggers the error
    description: str


ERROR_EXAMPLES: Final[tuple[ErrorExample, ...]] = (
    ErrorExample("400", "Bad Request", "/examples/400?invalid=invalid", "Client sent invalid data"),
    ErrorExample("401", "Unauthorized", "/examples/401", "Authentication required"),
    ErrorExample("403", "Forbidden", "/examples/403?role=user", "Insufficient permissions"),
    ErrorExample("404", "Not Found", "/examples/404?id=999", "Resource not found"),
    ErrorExample("409", "Conflict", "/examples/409?email=john@example.com", "Resource conflict"),
    ErrorExample("422", "Unprocessable Entity", "/examples/422?age=15", "Validation failed"),
    ErrorExample("429", "Too Many Requests", "/examples/429?requests=15", "Rate limit exceeded"),
    ErrorExample("500", "Internal Server Error", "/examples/500?trigger=error", "Unexpected server error"),
    ErrorExample("503", "Service Unavailable", "/examples/503?maintenance=true", "Service temporarily unavailable"),
)

# Inputs that drive the simulated failures
VALID_EXAMPLE_TOKEN: Final[str] = "valid-token"
REQUIRED_EXAMPLE_ROLE: Final[str] = "admin"
EXISTING_EXAMPLE_RESOURCE_ID: Final[str] = "123"
EXISTING_EXAMPLE_EMAILS: Final[frozenset[str]] = frozenset({"john@example.com", "jane@example.com"})
MINIMUM_EXAMPLE_AGE: Final[int] = 18
EXAMPLE_RATE_LIMIT: Final[int] = 10
RATE_LIMIT_RETRY_AFTER_SECONDS: Final[int] = 60
MAINTENANCE_RETRY_AFTER_SECONDS: Final[int] = 300
