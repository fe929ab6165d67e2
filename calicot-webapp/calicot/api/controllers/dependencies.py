# Standard library imports
from typing import Optional

# External package imports
from fastapi import HTTPException, Request, status

# Local application imports
from ...application.dto.user_dto import UserResponse


async def get_current_user(request: Request) -> UserResponse:
    """
    FastAPI dependency requiring the user attached by JwtMiddleware

    Raises:
        HTTPException: 401 when the request carried no valid bearer token
    """
    user: Optional[UserResponse] = getattr(request.state, "user", None)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
