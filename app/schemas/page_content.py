"""Schemas for editable page sections."""

from datetime import datetime
from typing import Any

from pydantic import Field

from app.schemas.common import CamelModel

SECTION_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"


class PageContentUpdate(CamelModel):
    """Body for PUT /admin/page-content/{section}: replaces the whole content object."""

    content: dict[str, Any] = Field(..., description="Free-form section content, e.g. {title, subtitle}")


class PageContent(CamelModel):
    """Stored page section."""

    id: int
    section: str
    content: dict[str, Any]
    updated_at: datetime
