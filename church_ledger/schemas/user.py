"""
Pydantic schemas for authentication and user management.

No response schema carries the password digest.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# --- Authentication ---

class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


class ResetPasswordRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    # Length policy is enforced by the CredentialService.
    # Clients send newPassword; new_password is accepted too.
    new_password: str = Field(min_length=1, alias="newPassword")

    model_config = {"populate_by_name": True}


class MessageResponse(BaseModel):
    message: str


# --- User Directory ---

class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    """Username is required on every update, even a password-only one."""
    username: str = Field(min_length=1, max_length=255)
    password: str | None = None


class UserResponse(BaseModel):
    id: int
    username: str
    created_at: datetime

    model_config = {"from_attributes": True}
