from .auth import (
    AuthenticateUserUseCase,
    RegisterUserUseCase,
    GetCurrentUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    ExternalLoginUseCase,
)

__all__ = [
    "AuthenticateUserUseCase",
    "RegisterUserUseCase",
    "GetCurrentUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "ExternalLoginUseCase",
]
