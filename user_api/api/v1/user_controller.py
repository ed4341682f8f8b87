# Standard library imports
from typing import List, Optional, Union

# External package imports
from fastapi import APIRouter, HTTPException, Query, status

# Local application imports
from ...application.dto.error_dto import ErrorResponse
from ...application.dto.user_dto import UserCreateRequest, UserResponse
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...domain.exceptions import InvalidUserError, UserError, UserNotFoundError
from ...di.container import get_container


router = APIRouter(tags=["users"])


async def _get_user(user_id: str) -> UserResponse:
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)

    try:
        return await get_user_use_case.execute(user_id)
    except UserNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except UserError as exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exception)
        )


@router.get(
    "",
    response_model=Union[List[UserResponse], UserResponse],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def list_users(
    user_id: Optional[str] = Query(default=None, alias="id", description="Return only the user with this ID"),
) -> Union[List[UserResponse], UserResponse]:
    """
    List all users, or get one user when the ``id`` query parameter is given

    Returns:
        List of UserResponse objects, or a single UserResponse
    """
    if user_id is not None:
        return await _get_user(user_id)

    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)

    try:
        return await list_users_use_case.execute()
    except UserError as exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exception)
        )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_user(user_id: str) -> UserResponse:
    """
    Get a user by ID

    Args:
        user_id: ID of the user

    Returns:
        UserResponse with user information
    """
    return await _get_user(user_id)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_user(request: UserCreateRequest) -> UserResponse:
    """
    Create a new user

    Args:
        request: User creation request

    Returns:
        UserResponse with the created user and its assigned ID
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)

    try:
        return await create_user_use_case.execute(request)
    except InvalidUserError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    except UserError as exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exception)
        )
