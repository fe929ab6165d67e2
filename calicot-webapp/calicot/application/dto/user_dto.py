from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response; password never leaves the process"""
    id: str
    user_name: str
    email: EmailStr
    first_name: str = ""
    last_name: str = ""
    password: Optional[str] = Field(default=None, exclude=True)

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            user_name=user.user_name,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
        )
