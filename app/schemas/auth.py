"""Request/response schemas for admin authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.schemas.common import CamelModel


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    # No minimum here: the bootstrap account may still carry its short default password.
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class ChangePasswordRequest(CamelModel):
    """Body for POST /admin/change-password."""

    current_password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)
    new_password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)


class AdminIdentity(CamelModel):
    """Authenticated admin as returned by login and /admin/me (never the password hash)."""

    id: int
    username: str
    is_admin: bool


class UserRecord(BaseModel):
    """Stored account as handed out by the storage layer. Internal only; not an API body."""

    id: int
    username: str
    password: str = Field(..., description="Encoded scrypt hash '<hex key>.<hex salt>'")
    is_admin: bool = False
    created_at: datetime | None = None

    class Config:
        from_attributes = True

    def identity(self) -> AdminIdentity:
        return AdminIdentity(id=self.id, username=self.username, is_admin=self.is_admin)
