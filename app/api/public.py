"""Public read endpoints consumed by the landing page. No session required."""

from typing import Any

from fastapi import APIRouter

from app.api.deps import StorageDep
from app.schemas.announcements import Announcement
from app.schemas.common import FallbackNotice
from app.schemas.site_settings import SiteSettings, default_site_settings
from app.schemas.social_links import SocialLink
from app.schemas.stream_channels import StreamChannel

router = APIRouter()


@router.get("/social-links", response_model=list[SocialLink] | FallbackNotice)
def get_social_links(storage: StorageDep) -> list[SocialLink] | FallbackNotice:
    """Social links by display order, or a notice telling the frontend to use its built-in list."""
    links = storage.list_social_links()
    if not links:
        return FallbackNotice(message="Social links served from the frontend")
    return links


@router.get("/stream-channels", response_model=list[StreamChannel] | FallbackNotice)
def get_stream_channels(storage: StorageDep) -> list[StreamChannel] | FallbackNotice:
    """Stream channels by display order, or a fallback notice when none are stored."""
    channels = storage.list_stream_channels()
    if not channels:
        return FallbackNotice(message="Stream channels served from the frontend")
    return channels


@router.get("/site-settings", response_model=SiteSettings)
def get_site_settings(storage: StorageDep) -> SiteSettings:
    """Stored theme, or the built-in defaults when none was saved."""
    return storage.get_site_settings() or default_site_settings()


@router.get("/announcements", response_model=list[Announcement])
def get_announcements(storage: StorageDep) -> list[Announcement]:
    """Announcements that are active and not expired at request time."""
    return storage.list_active_announcements()


@router.get("/page-content/{section}", response_model=dict[str, Any] | None)
def get_page_content(section: str, storage: StorageDep) -> dict[str, Any] | None:
    """Content object of one page section, or null if no such section was saved."""
    page = storage.get_page_content(section)
    return page.content if page else None
