from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UserRole(str, Enum):
    """Roles a user account can hold"""
    ADMIN = "admin"
    USER = "user"


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    hashed_password: str

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")


@dataclass
class CreateUser:
    """Fields needed to create a user; password is still plain text here"""
    email: str
    first_name: str
    last_name: str
    password: str
    role: str
    username: str
