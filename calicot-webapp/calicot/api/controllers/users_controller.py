# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import (
    AuthenticateRequestUser,
    AuthenticateResponse,
    UserRegistrationRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.authenticate_user import AuthenticateUserUseCase
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.list_users import ListUsersUseCase, GetUserUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["users"])


@router.post("/authenticate", response_model=AuthenticateResponse)
async def authenticate(request: AuthenticateRequestUser) -> AuthenticateResponse:
    """
    Authenticate a user name / password pair and get an access token

    Args:
        request: User name and password

    Returns:
        AuthenticateResponse with access token and user information
    """
    container = get_container()
    authenticate_use_case = container.get(AuthenticateUserUseCase)

    response = await authenticate_use_case.execute(request)
    if response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Username or password is incorrect"
        )
    return response


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )


@router.get("", response_model=List[UserResponse])
@router.get("/index", response_model=List[UserResponse])
async def list_users(current_user: UserResponse = Depends(get_current_user)) -> List[UserResponse]:
    container = get_container()
    return await container.get(ListUsersUseCase).execute()


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """
    Get current authenticated user information

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with user information
    """
    return current_user


@router.get("/details/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    container = get_container()
    try:
        return await container.get(GetUserUseCase).execute(user_id)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
