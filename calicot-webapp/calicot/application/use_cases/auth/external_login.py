# Standard library imports
import logging
import secrets

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password
from ....infrastructure.external.google_oauth_client import GoogleOAuthClient
from ...dto.auth_dto import AuthenticateResponse, ExternalLoginModel
from .authenticate_user import issue_token

logger = logging.getLogger(__name__)


class ExternalLoginUseCase:
    """
    Use case for Google federated login.

    Resolves the provider's claims to a local user, creating one on first
    sign-in, and issues the same JWT as a password login.
    """

    def __init__(self, user_repository: UserRepository, google_client: GoogleOAuthClient) -> None:
        self.user_repository = user_repository
        self.google_client = google_client

    def build_challenge_url(self, state: str) -> str:
        if not self.google_client.is_configured:
            raise ValueError("Google authentication is not configured")
        return self.google_client.build_authorization_url(state)

    async def execute(self, code: str) -> AuthenticateResponse:
        """
        Complete the login for an authorization code

        Raises:
            ValueError: If Google returns no verified email, or the email is
                already taken as another account's user name
            httpx.HTTPStatusError: If a Google endpoint rejects the request
        """
        claims = await self.google_client.fetch_claims_for_code(code)
        email = claims.get("email")
        if not email:
            raise ValueError("Google account did not share an email address")
        if not _is_verified(claims.get("email_verified")):
            logger.warning(f"Rejected external login for unverified email {email}")
            raise ValueError("Google account email address is not verified")

        model = ExternalLoginModel(email=email, principal=claims)
        return await self.sign_in(model)

    async def sign_in(self, model: ExternalLoginModel) -> AuthenticateResponse:
        user = await self.user_repository.find_by_email(model.email)
        if user is None:
            if await self.user_repository.find_by_user_name(model.email) is not None:
                raise ValueError(f"User name {model.email} is already taken")
            # Password login stays disabled for federated accounts
            user = await self.user_repository.save(User(
                id=None,
                user_name=model.email,
                email=model.email,
                password_hash=hash_password(secrets.token_urlsafe(32)),
                first_name=model.principal.get("given_name", ""),
                last_name=model.principal.get("family_name", ""),
            ))
            logger.info(f"Created local user {user.id} for external login {model.email}")
        else:
            logger.info(f"External login matched existing user {user.id}")

        return issue_token(user)


def _is_verified(claim: object) -> bool:
    # Some Google endpoints send the flag as a string
    return claim is True or (isinstance(claim, str) and claim.lower() == "true")
