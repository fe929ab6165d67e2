from .authenticate_user import AuthenticateUserUseCase
from .register_user import RegisterUserUseCase
from .get_current_user import GetCurrentUserUseCase
from .list_users import ListUsersUseCase, GetUserUseCase
from .external_login import ExternalLoginUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "RegisterUserUseCase",
    "GetCurrentUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "ExternalLoginUseCase",
]
