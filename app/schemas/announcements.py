"""Schemas for announcements."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, PartialUpdate, ensure_utc

TITLE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 10_000


class AnnouncementCreate(CamelModel):
    """Body for POST /admin/announcements. createdAt is always set by the server."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., min_length=1, max_length=CONTENT_MAX_LENGTH)
    active: bool = True
    expires_at: datetime | None = Field(default=None, description="Null means it never expires")

    @field_validator("expires_at")
    @classmethod
    def expires_at_as_utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)


class AnnouncementUpdate(PartialUpdate):
    """Body for PUT /admin/announcements/{id}. Send expiresAt: null to remove the expiry."""

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"expires_at"})

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str | None = Field(default=None, min_length=1, max_length=CONTENT_MAX_LENGTH)
    active: bool | None = None
    expires_at: datetime | None = None

    @field_validator("expires_at")
    @classmethod
    def expires_at_as_utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)


class Announcement(CamelModel):
    """Stored announcement."""

    id: int
    title: str
    content: str
    active: bool
    created_at: datetime
    expires_at: datetime | None = None

    @field_validator("created_at", "expires_at")
    @classmethod
    def timestamps_as_utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)

    def is_active(self, now: datetime) -> bool:
        """Active flag set and not yet expired at `now`."""
        return self.active and (self.expires_at is None or self.expires_at > now)
