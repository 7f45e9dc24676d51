# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError
from pydantic import BaseModel, Field, ValidationError


class TokenValidationError(ValueError):
    """Raised when a token cannot be trusted (signature, algorithm, expiry or claims)"""


class TokenClaims(BaseModel):
    """Identity claims carried by an access token"""
    sub: str = Field(min_length=1)
    username: str = Field(min_length=1)
    role: str = Field(min_length=1)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash
        return False


class TokenManager:
    """
    Issues and verifies signed access tokens.

    The signing secret and algorithm are fixed at construction; verification
    only accepts tokens signed with that exact algorithm.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        if not secret_key:
            raise ValueError("Token secret key is required")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, sub: str, username: str, role: str) -> str:
        """
        Create a signed token for the given identity

        Args:
            sub: Subject (user ID)
            username: Username claim
            role: Role claim

        Returns:
            Encoded JWT token string
        """
        issued_at = int(time.time())
        expires_at = issued_at + (self.expire_minutes * 60)

        token_payload: Dict[str, Any] = {
            "sub": sub,
            "username": username,
            "role": role,
            "iat": issued_at,
            "exp": expires_at,
        }

        return jwt.encode(token_payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and extract its identity claims

        Args:
            token: The JWT token string to verify

        Returns:
            TokenClaims parsed from the token payload

        Raises:
            TokenValidationError: If the algorithm is unexpected, the signature
                or expiry is invalid, or the claims are missing or malformed
        """
        try:
            decoded = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except InvalidTokenError as e:
            raise TokenValidationError(f"Invalid token: {str(e)}")

        try:
            return TokenClaims.model_validate(decoded)
        except ValidationError as e:
            fields = ", ".join(str(error["loc"][0]) for error in e.errors() if error["loc"])
            raise TokenValidationError(f"Invalid token claims: {fields or 'malformed payload'}")
