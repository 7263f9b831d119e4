"""Schemas for the site theme (colours, radius, font)."""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate

# Applied when no row is stored yet and as the base of the first write.
DEFAULT_SITE_SETTINGS: dict[str, str] = {
    "primary_color": "#f97316",
    "secondary_color": "#000000",
    "border_radius": "0.5rem",
    "font_family": "'Inter', sans-serif",
}

THEME_VALUE_MAX_LENGTH = 255


class SiteSettings(CamelModel):
    """Site theme. id is null when the hard-coded defaults are being served."""

    id: int | None = None
    primary_color: str
    secondary_color: str
    border_radius: str
    font_family: str
    updated_at: datetime | None = None


class SiteSettingsUpdate(PartialUpdate):
    """Partial theme update; omitted fields keep their current (or default) value."""

    primary_color: str | None = Field(default=None, min_length=1, max_length=THEME_VALUE_MAX_LENGTH)
    secondary_color: str | None = Field(default=None, min_length=1, max_length=THEME_VALUE_MAX_LENGTH)
    border_radius: str | None = Field(default=None, min_length=1, max_length=THEME_VALUE_MAX_LENGTH)
    font_family: str | None = Field(default=None, min_length=1, max_length=THEME_VALUE_MAX_LENGTH)


def default_site_settings() -> SiteSettings:
    return SiteSettings(**DEFAULT_SITE_SETTINGS)
