"""
Demonstration endpoints, each returning one specific HTTP error code.

Every endpoint answers 200 on its happy path. The query parameter or
header named in the catalog switches it to the error, which is rendered
by the shared error handler.
"""

# Standard library imports
import re
from datetime import datetime, timezone
from typing import Dict, Optional

# External package imports
from fastapi import APIRouter, Header, HTTPException, Query, status

# Local application imports
from ...application.dto.error_dto import (
    ErrorExampleCatalogResponse,
    ErrorExampleResponse,
    ErrorResponse,
)
from ...domain.constants.error_examples import (
    ERROR_EXAMPLES,
    EXAMPLE_RATE_LIMIT,
    EXISTING_EXAMPLE_EMAILS,
    EXISTING_EXAMPLE_RESOURCE_ID,
    MAINTENANCE_RETRY_AFTER_SECONDS,
    MINIMUM_EXAMPLE_AGE,
    RATE_LIMIT_RETRY_AFTER_SECONDS,
    REQUIRED_EXAMPLE_ROLE,
    VALID_EXAMPLE_TOKEN,
)


router = APIRouter(tags=["error-examples"])


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Read the leading integer of value, ignoring trailing text ("15abc" -> 15)"""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


@router.get("", response_model=ErrorExampleCatalogResponse)
async def list_error_examples() -> ErrorExampleCatalogResponse:
    """List all error code examples"""
    return ErrorExampleCatalogResponse(
        available_examples=[
            ErrorExampleResponse(
                code=example.code,
                name=example.name,
                endpoint=example.endpoint,
                description=example.description,
            )
            for example in ERROR_EXAMPLES
        ],
        message="Test these endpoints to see different error responses",
    )


@router.get("/400", responses={400: {"model": ErrorResponse}})
async def example_bad_request(
    invalid: Optional[str] = Query(default=None, description="Send 'invalid' to trigger error"),
) -> Dict[str, str]:
    """Client sends invalid data"""
    if invalid == "invalid":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bad Request: The parameter 'invalid' cannot have value 'invalid'",
        )
    return {"message": "Request is valid", "status": "success"}


@router.get("/401", responses={401: {"model": ErrorResponse}})
async def example_unauthorized(
    authorization: Optional[str] = Header(default=None, description="Bearer token"),
) -> Dict[str, str]:
    """Authentication is required but missing or wrong"""
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Missing authentication token",
        )
    if authorization != f"Bearer {VALID_EXAMPLE_TOKEN}":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Invalid authentication token",
        )
    return {"message": "Authentication successful", "status": "authenticated"}


@router.get("/403", responses={403: {"model": ErrorResponse}})
async def example_forbidden(
    role: Optional[str] = Query(default=None, description="User role (admin or user)"),
) -> Dict[str, str]:
    """User is known but lacks permission"""
    if role != REQUIRED_EXAMPLE_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: You don't have permission to access this resource. Admin role required.",
        )
    return {"message": "Access granted", "status": "authorized"}


@router.get("/404", responses={404: {"model": ErrorResponse}})
async def example_not_found(
    resource_id: Optional[str] = Query(default=None, alias="id", description="Resource ID"),
) -> Dict[str, str]:
    """Requested resource does not exist"""
    if resource_id != EXISTING_EXAMPLE_RESOURCE_ID:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Not Found: Resource with the specified ID does not exist",
        )
    return {"message": "Resource found", "id": resource_id}


@router.get("/409", responses={409: {"model": ErrorResponse}})
async def example_conflict(
    email: str = Query(default="", description="Email to check"),
) -> Dict[str, str]:
    """Request conflicts with existing state"""
    if email in EXISTING_EXAMPLE_EMAILS:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Conflict: Email already exists in the system",
        )
    return {"message": "Email is available", "email": email}


@router.get("/422", responses={422: {"model": ErrorResponse}})
async def example_unprocessable_entity(
    age: Optional[str] = Query(default=None, description="User age"),
) -> Dict[str, str]:
    """Request is well formed but fails business validation"""
    if not age:
        raise HTTPException(
            status_code=422,
            detail="Unprocessable Entity: Age is required",
        )

    parsed_age = _parse_int(age)
    if parsed_age is None or parsed_age < MINIMUM_EXAMPLE_AGE:
        raise HTTPException(
            status_code=422,
            detail=f"Unprocessable Entity: Age must be {MINIMUM_EXAMPLE_AGE} or older",
        )
    return {"message": "Age is valid", "age": age}


@router.get("/429", responses={429: {"model": ErrorResponse}})
async def example_too_many_requests(
    requests: str = Query(default="", description="Number of requests made"),
) -> Dict[str, str]:
    """Rate limit exceeded"""
    request_count = _parse_int(requests) or 0

    if request_count > EXAMPLE_RATE_LIMIT:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too Many Requests: Rate limit exceeded. Please try again later.",
            headers={"Retry-After": str(RATE_LIMIT_RETRY_AFTER_SECONDS)},
        )
    return {"message": "Request processed", "requests": requests}


@router.get("/500", responses={500: {"model": ErrorResponse}})
async def example_internal_server_error(
    trigger: Optional[str] = Query(default=None, description="Set to 'error' to trigger 500"),
) -> Dict[str, str]:
    """Unexpected server error"""
    if trigger == "error":
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error: An unexpected error occurred. Please try again later.",
        )
    return {"message": "Server is working properly", "status": "healthy"}


@router.get("/503", responses={503: {"model": ErrorResponse}})
async def example_service_unavailable(
    maintenance: Optional[str] = Query(default=None, description="Set to 'true' for maintenance mode"),
) -> Dict[str, str]:
    """Service is temporarily unavailable"""
    if maintenance == "true":
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service Unavailable: System is under maintenance. Please try again later.",
            headers={"Retry-After": str(MAINTENANCE_RETRY_AFTER_SECONDS)},
        )
    return {
        "message": "Service is available",
        "uptime": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
