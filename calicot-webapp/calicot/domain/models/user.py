from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - identity fields plus profile names"""
    id: Optional[str]
    user_name: str
    email: str
    password_hash: str
    first_name: str = ""
    last_name: str = ""

    def __post_init__(self):
        """Business validations"""
        if not self.user_name or not self.user_name.strip():
            raise ValueError("User name is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
