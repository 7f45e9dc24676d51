from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """DTO for user login request"""
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=256)


class RefreshTokenRequest(BaseModel):
    """DTO for token refresh request"""
    token: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """DTO for authentication token response (login and refresh)"""
    token: str
