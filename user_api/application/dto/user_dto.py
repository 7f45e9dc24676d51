from pydantic import BaseModel, EmailStr, Field, field_validator

from ...domain.models.user import User, UserRole


class CreateUserRequest(BaseModel):
    """DTO for user creation request"""
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=8, max_length=256)
    role: UserRole
    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9._-]+$")

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
        )


class CreateUserResponse(BaseModel):
    """DTO for user creation response"""
    user: UserResponse


class GetUserResponse(BaseModel):
    """DTO for user lookup response"""
    user: UserResponse
