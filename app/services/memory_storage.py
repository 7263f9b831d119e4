"""Process-local Storage implementation backed by dicts. Non-persistent; for development and tests."""

import threading
from datetime import datetime, timezone
from itertools import count
from typing import Any

from app.schemas.announcements import Announcement, AnnouncementCreate
from app.schemas.auth import UserRecord
from app.schemas.page_content import PageContent
from app.schemas.site_settings import DEFAULT_SITE_SETTINGS, SiteSettings
from app.schemas.social_links import SocialLink, SocialLinkCreate
from app.schemas.stream_channels import StreamChannel, StreamChannelCreate
from app.services.storage import Storage


def _by_order(items: list) -> list:
    # dicts keep insertion order and sorted() is stable, so equal order values stay in id order.
    return sorted(items, key=lambda item: item.order)


class MemoryStorage(Storage):
    """Dict-backed storage. Records are immutable pydantic models replaced on update."""

    backend_name = "memory"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = {name: count(1) for name in ("users", "links", "channels", "announcements", "pages")}
        self._users: dict[int, UserRecord] = {}
        self._site_settings: SiteSettings | None = None
        self._social_links: dict[int, SocialLink] = {}
        self._stream_channels: dict[int, StreamChannel] = {}
        self._announcements: dict[int, Announcement] = {}
        self._pages: dict[str, PageContent] = {}

    def _next_id(self, collection: str) -> int:
        return next(self._ids[collection])

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    # Users

    def get_user(self, user_id: int) -> UserRecord | None:
        return self._users.get(user_id)

    def _find_user(self, username: str) -> UserRecord | None:
        # Caller holds self._lock.
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def get_user_by_username(self, username: str) -> UserRecord | None:
        with self._lock:
            return self._find_user(username)

    def create_user(self, username: str, password_hash: str, is_admin: bool = False) -> UserRecord:
        with self._lock:
            if self._find_user(username) is not None:
                raise ValueError(f"User '{username}' already exists")
            user = UserRecord(
                id=self._next_id("users"),
                username=username,
                password=password_hash,
                is_admin=is_admin,
                created_at=self._now(),
            )
            self._users[user.id] = user
            return user

    def update_user_password(self, user_id: int, password_hash: str) -> UserRecord | None:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user = user.model_copy(update={"password": password_hash})
            self._users[user_id] = user
            return user

    # Site settings

    def get_site_settings(self) -> SiteSettings | None:
        return self._site_settings

    def update_site_settings(self, changes: dict[str, Any]) -> SiteSettings:
        with self._lock:
            if self._site_settings is None:
                current: dict[str, Any] = {"id": 1, **DEFAULT_SITE_SETTINGS}
            else:
                current = self._site_settings.model_dump()
            self._site_settings = SiteSettings(**{**current, **changes, "updated_at": self._now()})
            return self._site_settings

    # Social links

    def list_social_links(self) -> list[SocialLink]:
        with self._lock:
            links = list(self._social_links.values())
        return _by_order(links)

    def get_social_link(self, link_id: int) -> SocialLink | None:
        return self._social_links.get(link_id)

    def create_social_link(self, data: SocialLinkCreate) -> SocialLink:
        with self._lock:
            link = SocialLink(id=self._next_id("links"), **data.model_dump())
            self._social_links[link.id] = link
            return link

    def update_social_link(self, link_id: int, changes: dict[str, Any]) -> SocialLink | None:
        with self._lock:
            link = self._social_links.get(link_id)
            if link is None:
                return None
            link = SocialLink(**{**link.model_dump(), **changes, "id": link_id})
            self._social_links[link_id] = link
            return link

    def delete_social_link(self, link_id: int) -> bool:
        with self._lock:
            return self._social_links.pop(link_id, None) is not None

    # Stream channels

    def list_stream_channels(self) -> list[StreamChannel]:
        with self._lock:
            channels = list(self._stream_channels.values())
        return _by_order(channels)

    def get_stream_channel(self, channel_id: int) -> StreamChannel | None:
        return self._stream_channels.get(channel_id)

    def create_stream_channel(self, data: StreamChannelCreate) -> StreamChannel:
        with self._lock:
            channel = StreamChannel(id=self._next_id("channels"), **data.model_dump())
            self._stream_channels[channel.id] = channel
            return channel

    def update_stream_channel(self, channel_id: int, changes: dict[str, Any]) -> StreamChannel | None:
        with self._lock:
            channel = self._stream_channels.get(channel_id)
            if channel is None:
                return None
            channel = StreamChannel(**{**channel.model_dump(), **changes, "id": channel_id})
            self._stream_channels[channel_id] = channel
            return channel

    def delete_stream_channel(self, channel_id: int) -> bool:
        with self._lock:
            return self._stream_channels.pop(channel_id, None) is not None

    # Announcements

    def list_announcements(self) -> list[Announcement]:
        with self._lock:
            return list(self._announcements.values())

    def list_active_announcements(self, now: datetime | None = None) -> list[Announcement]:
        now = now or self._now()
        with self._lock:
            announcements = list(self._announcements.values())
        return [a for a in announcements if a.is_active(now)]

    def get_announcement(self, announcement_id: int) -> Announcement | None:
        return self._announcements.get(announcement_id)

    def create_announcement(self, data: AnnouncementCreate) -> Announcement:
        with self._lock:
            announcement = Announcement(
                id=self._next_id("announcements"),
                created_at=self._now(),
                **data.model_dump(),
            )
            self._announcements[announcement.id] = announcement
            return announcement

    def update_announcement(self, announcement_id: int, changes: dict[str, Any]) -> Announcement | None:
        with self._lock:
            announcement = self._announcements.get(announcement_id)
            if announcement is None:
                return None
            announcement = Announcement(
                **{**announcement.model_dump(), **changes, "id": announcement_id}
            )
            self._announcements[announcement_id] = announcement
            return announcement

    def delete_announcement(self, announcement_id: int) -> bool:
        with self._lock:
            return self._announcements.pop(announcement_id, None) is not None

    # Page content

    def list_page_content(self) -> list[PageContent]:
        with self._lock:
            pages = list(self._pages.values())
        return sorted(pages, key=lambda page: page.id)

    def get_page_content(self, section: str) -> PageContent | None:
        return self._pages.get(section)

    def update_page_content(self, section: str, content: dict[str, Any]) -> PageContent:
        with self._lock:
            existing = self._pages.get(section)
            page = PageContent(
                id=existing.id if existing else self._next_id("pages"),
                section=section,
                content=content,
                updated_at=self._now(),
            )
            self._pages[section] = page
            return page

    def ping(self) -> bool:
        return True
