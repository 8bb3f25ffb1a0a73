"""
Authentication and authorization schemas.

These schemas define the API contracts for user authentication,
registration, and JWT token management.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator


class LoginRequest(BaseModel):
    """User login request schema."""

    email: EmailStr = Field(description="Account email")
    password: str = Field(min_length=1, max_length=128, description="User password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "ada@example.com", "password": "securepassword123"}}
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class RegisterRequest(BaseModel):
    """User registration request schema."""

    email: EmailStr = Field(description="Unique email address")
    password: str = Field(min_length=8, max_length=128, description="User password")
    confirm_password: str = Field(min_length=8, max_length=128, description="Password confirmation")
    name: Optional[str] = Field(default=None, max_length=100, description="Display name (optional)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ada@example.com",
                "password": "securepassword123",
                "confirm_password": "securepassword123",
                "name": "Ada Lovelace",
            }
        }
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("name")
    @classmethod
    def blank_name_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            v = v.strip()
        return v or None

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        """Validate that passwords match."""
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class UserResponse(BaseModel):
    """User information response schema."""

    id: uuid.UUID = Field(description="User unique identifier")
    email: str = Field(description="Email address")
    name: Optional[str] = Field(default=None, description="Display name")
    is_active: bool = Field(description="Whether user account is active")
    created_at: datetime = Field(description="Account creation timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "email": "ada@example.com",
                "name": "Ada Lovelace",
                "is_active": True,
                "created_at": "2025-09-13T10:30:00Z",
            }
        },
    )


class TokenResponse(BaseModel):
    """JWT token response schema."""

    access_token: str = Field(description="JWT access token")
    refresh_token: str = Field(description="Opaque refresh token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Access token lifetime in seconds")
    user: UserResponse = Field(description="User information")


class RefreshTokenRequest(BaseModel):
    """Refresh token request schema."""

    refresh_token: str = Field(description="Refresh token issued at login")
