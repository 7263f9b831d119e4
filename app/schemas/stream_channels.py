"""Schemas for stream channel listings."""

from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate

ChannelType = Literal["primary", "secondary"]

TEXT_MAX_LENGTH = 1024
DESCRIPTION_MAX_LENGTH = 4000
URL_MAX_LENGTH = 2048


class StreamChannelCreate(CamelModel):
    """Body for POST /admin/stream-channels."""

    name: str = Field(..., min_length=1, max_length=TEXT_MAX_LENGTH)
    type: ChannelType = Field(..., description="'primary' or 'secondary'")
    description: str = Field(..., max_length=DESCRIPTION_MAX_LENGTH)
    platform: str = Field(..., min_length=1, max_length=TEXT_MAX_LENGTH)
    url: str = Field(..., min_length=1, max_length=URL_MAX_LENGTH)
    color: str = Field(..., max_length=TEXT_MAX_LENGTH)
    order: int


class StreamChannelUpdate(PartialUpdate):
    """Body for PUT /admin/stream-channels/{id}."""

    name: str | None = Field(default=None, min_length=1, max_length=TEXT_MAX_LENGTH)
    type: ChannelType | None = None
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    platform: str | None = Field(default=None, min_length=1, max_length=TEXT_MAX_LENGTH)
    url: str | None = Field(default=None, min_length=1, max_length=URL_MAX_LENGTH)
    color: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    order: int | None = None


class StreamChannel(StreamChannelCreate):
    """Stored stream channel."""

    id: int
