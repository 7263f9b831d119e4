"""
Storage interface for accounts and site content, plus backend selection.

Two implementations exist: DatabaseStorage (SQLAlchemy, durable) and
MemoryStorage (process-local, lost on restart). One is chosen at startup by
STORAGE_BACKEND and used for the life of the process; they are never mixed.

Contract shared by both:
- create assigns the id (and server timestamps) and returns the stored record.
- update applies only the given fields and returns None for an unknown id.
- delete returns False for an unknown id.
- social links and stream channels are listed by order ascending, ties by id.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Any

from app.schemas.announcements import Announcement, AnnouncementCreate
from app.schemas.auth import UserRecord
from app.schemas.page_content import PageContent
from app.schemas.site_settings import SiteSettings
from app.schemas.social_links import SocialLink, SocialLinkCreate
from app.schemas.stream_channels import StreamChannel, StreamChannelCreate

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Typed CRUD over users, site settings, social links, stream channels, announcements, page content."""

    backend_name: str = ""

    # Users

    @abstractmethod
    def get_user(self, user_id: int) -> UserRecord | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> UserRecord | None:
        """Exact, case-sensitive match."""

    @abstractmethod
    def create_user(self, username: str, password_hash: str, is_admin: bool = False) -> UserRecord: ...

    @abstractmethod
    def update_user_password(self, user_id: int, password_hash: str) -> UserRecord | None: ...

    # Site settings

    @abstractmethod
    def get_site_settings(self) -> SiteSettings | None:
        """Stored theme, or None when nothing was saved yet (callers fall back to defaults)."""

    @abstractmethod
    def update_site_settings(self, changes: dict[str, Any]) -> SiteSettings:
        """Upsert the singleton row; the first write is merged over DEFAULT_SITE_SETTINGS."""

    # Social links

    @abstractmethod
    def list_social_links(self) -> list[SocialLink]: ...

    @abstractmethod
    def get_social_link(self, link_id: int) -> SocialLink | None: ...

    @abstractmethod
    def create_social_link(self, data: SocialLinkCreate) -> SocialLink: ...

    @abstractmethod
    def update_social_link(self, link_id: int, changes: dict[str, Any]) -> SocialLink | None: ...

    @abstractmethod
    def delete_social_link(self, link_id: int) -> bool: ...

    # Stream channels

    @abstractmethod
    def list_stream_channels(self) -> list[StreamChannel]: ...

    @abstractmethod
    def get_stream_channel(self, channel_id: int) -> StreamChannel | None: ...

    @abstractmethod
    def create_stream_channel(self, data: StreamChannelCreate) -> StreamChannel: ...

    @abstractmethod
    def update_stream_channel(self, channel_id: int, changes: dict[str, Any]) -> StreamChannel | None: ...

    @abstractmethod
    def delete_stream_channel(self, channel_id: int) -> bool: ...

    # Announcements

    @abstractmethod
    def list_announcements(self) -> list[Announcement]: ...

    @abstractmethod
    def list_active_announcements(self, now: datetime | None = None) -> list[Announcement]:
        """Announcements with active=True whose expires_at is null or after `now` (default: current UTC time)."""

    @abstractmethod
    def get_announcement(self, announcement_id: int) -> Announcement | None: ...

    @abstractmethod
    def create_announcement(self, data: AnnouncementCreate) -> Announcement: ...

    @abstractmethod
    def update_announcement(self, announcement_id: int, changes: dict[str, Any]) -> Announcement | None: ...

    @abstractmethod
    def delete_announcement(self, announcement_id: int) -> bool: ...

    # Page content

    @abstractmethod
    def list_page_content(self) -> list[PageContent]: ...

    @abstractmethod
    def get_page_content(self, section: str) -> PageContent | None: ...

    @abstractmethod
    def update_page_content(self, section: str, content: dict[str, Any]) -> PageContent:
        """Create the section if unused, otherwise replace its content and bump updated_at."""

    # Health

    @abstractmethod
    def ping(self) -> bool:
        """True when the backing store is reachable."""


def build_storage(settings: "Settings") -> Storage:
    """Instantiate the backend named by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "memory":
        from app.services.memory_storage import MemoryStorage

        logger.warning("Using in-memory storage; content will be lost on restart")
        return MemoryStorage()

    from app.core.database import SessionLocal
    from app.services.database_storage import DatabaseStorage

    logger.info("Using database storage")
    return DatabaseStorage(SessionLocal)
