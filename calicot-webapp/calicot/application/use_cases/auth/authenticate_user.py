# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import AuthenticateRequestUser, AuthenticateResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


def issue_token(user: User) -> AuthenticateResponse:
    """Sign an access token for a user and wrap it with the user's public fields"""
    token = create_jwt_token({
        "sub": user.id or "",  # JWT standard claim (subject)
        UserFields.UNIQUE_NAME_CLAIM: user.user_name,
        UserFields.EMAIL: user.email,
    })
    return AuthenticateResponse(access_token=token, user=UserResponse.from_domain(user))


class AuthenticateUserUseCase:
    """Use case for validating user name / password and issuing a JWT"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: AuthenticateRequestUser) -> Optional[AuthenticateResponse]:
        """
        Authenticate user and generate access token

        Args:
            request: User name and password

        Returns:
            AuthenticateResponse if authentication successful, None otherwise
        """
        user = await self.user_repository.find_by_user_name(request.user_name)
        if user is None:
            logger.warning(f"Authentication failed: unknown user {request.user_name}")
            return None

        if not verify_password(request.password, user.password_hash):
            logger.warning(f"Authentication failed: bad password for {request.user_name}")
            return None

        return issue_token(user)
