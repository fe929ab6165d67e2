from typing import Any, Dict

from pydantic import BaseModel, EmailStr, Field

from .user_dto import UserResponse


class AuthenticateRequestUser(BaseModel):
    """DTO for user name / password authentication"""
    user_name: str = Field(min_length=1, max_length=256)
    password: str = Field(min_length=1, max_length=256)


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    user_name: str = Field(min_length=1, max_length=256)
    email: EmailStr
    password: str = Field(min_length=8, max_length=256)
    first_name: str = Field(default="", max_length=200)
    last_name: str = Field(default="", max_length=200)


class ExternalLoginModel(BaseModel):
    """Federated login carrier: email plus the provider's claims (not persisted)"""
    email: EmailStr
    principal: Dict[str, Any] = Field(default_factory=dict)


class AuthenticateResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
