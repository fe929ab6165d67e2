from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.authenticate_user import AuthenticateUserUseCase
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.auth.list_users import ListUsersUseCase, GetUserUseCase
from ...application.use_cases.auth.external_login import ExternalLoginUseCase
from ...infrastructure.external.google_oauth_client import GoogleOAuthClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        if not container.is_registered(GoogleOAuthClient):
            container.register_singleton(GoogleOAuthClient, GoogleOAuthClient())

        container.register_factory(
            AuthenticateUserUseCase,
            lambda: AuthenticateUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            GetCurrentUserUseCase,
            lambda: GetCurrentUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ExternalLoginUseCase,
            lambda: ExternalLoginUseCase(
                user_repository=container.get(UserRepository),
                google_client=container.get(GoogleOAuthClient),
            )
        )
