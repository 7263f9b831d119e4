"""Schemas for social profile links."""

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate

TEXT_MAX_LENGTH = 1024
URL_MAX_LENGTH = 2048


class SocialLinkCreate(CamelModel):
    """Body for POST /admin/social-links."""

    platform: str = Field(..., min_length=1, max_length=TEXT_MAX_LENGTH, description="e.g. twitch, discord")
    name: str = Field(..., min_length=1, max_length=TEXT_MAX_LENGTH)
    url: str = Field(..., min_length=1, max_length=URL_MAX_LENGTH)
    icon: str = Field(..., max_length=TEXT_MAX_LENGTH)
    color: str = Field(..., max_length=TEXT_MAX_LENGTH)
    username: str = Field(..., max_length=TEXT_MAX_LENGTH)
    description: str = Field(..., max_length=TEXT_MAX_LENGTH)
    order: int = Field(..., description="Display rank; lower comes first")


class SocialLinkUpdate(PartialUpdate):
    """Body for PUT /admin/social-links/{id}."""

    platform: str | None = Field(default=None, min_length=1, max_length=TEXT_MAX_LENGTH)
    name: str | None = Field(default=None, min_length=1, max_length=TEXT_MAX_LENGTH)
    url: str | None = Field(default=None, min_length=1, max_length=URL_MAX_LENGTH)
    icon: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    color: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    username: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    order: int | None = None


class SocialLink(SocialLinkCreate):
    """Stored social link."""

    id: int
