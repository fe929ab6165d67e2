from .auth_dto import (
    AuthenticateRequestUser,
    AuthenticateResponse,
    ExternalLoginModel,
    UserRegistrationRequest,
)
from .user_dto import UserResponse
from .produit_dto import ProduitRequest, ProduitResponse, ProduitExistsResponse
from .file_dto import FileUploadResponse

__all__ = [
    "AuthenticateRequestUser",
    "AuthenticateResponse",
    "ExternalLoginModel",
    "UserRegistrationRequest",
    "UserResponse",
    "ProduitRequest",
    "ProduitResponse",
    "ProduitExistsResponse",
    "FileUploadResponse",
]
