"""SQLAlchemy-backed Storage. Every call opens its own short-lived session and commits before returning."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.core.database import check_db_connected
from app.models import Announcement as AnnouncementRow
from app.models import PageContent as PageContentRow
from app.models import SiteSettings as SiteSettingsRow
from app.models import SocialLink as SocialLinkRow
from app.models import StreamChannel as StreamChannelRow
from app.models import User as UserRow
from app.schemas.announcements import Announcement, AnnouncementCreate
from app.schemas.auth import UserRecord
from app.schemas.page_content import PageContent
from app.schemas.site_settings import DEFAULT_SITE_SETTINGS, SiteSettings
from app.schemas.social_links import SocialLink, SocialLinkCreate
from app.schemas.stream_channels import StreamChannel, StreamChannelCreate
from app.services.storage import Storage

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class DatabaseStorage(Storage):
    """Storage over the relational schema in app.models."""

    backend_name = "database"

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Yield a session; roll back on error and always close."""
        db = self._session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _update_row(self, model: type, row_id: int, changes: dict[str, Any]) -> Any | None:
        with self._session() as db:
            row = db.get(model, row_id)
            if row is None:
                return None
            for field, value in changes.items():
                setattr(row, field, value)
            db.commit()
            db.refresh(row)
            return row

    def _delete_row(self, model: type, row_id: int) -> bool:
        with self._session() as db:
            row = db.get(model, row_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    def _insert_row(self, row: Any) -> Any:
        with self._session() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
            return row

    # Users

    def get_user(self, user_id: int) -> UserRecord | None:
        with self._session() as db:
            row = db.get(UserRow, user_id)
            return UserRecord.model_validate(row) if row else None

    def get_user_by_username(self, username: str) -> UserRecord | None:
        with self._session() as db:
            row = db.query(UserRow).filter(UserRow.username == username).first()
            return UserRecord.model_validate(row) if row else None

    def create_user(self, username: str, password_hash: str, is_admin: bool = False) -> UserRecord:
        try:
            row = self._insert_row(
                UserRow(username=username, password=password_hash, is_admin=is_admin)
            )
        except IntegrityError as e:
            raise ValueError(f"User '{username}' already exists") from e
        return UserRecord.model_validate(row)

    def update_user_password(self, user_id: int, password_hash: str) -> UserRecord | None:
        row = self._update_row(UserRow, user_id, {"password": password_hash})
        return UserRecord.model_validate(row) if row else None

    # Site settings

    def get_site_settings(self) -> SiteSettings | None:
        with self._session() as db:
            row = db.query(SiteSettingsRow).order_by(SiteSettingsRow.id).first()
            return SiteSettings.model_validate(row) if row else None

    def update_site_settings(self, changes: dict[str, Any]) -> SiteSettings:
        with self._session() as db:
            row = db.query(SiteSettingsRow).order_by(SiteSettingsRow.id).first()
            if row is None:
                row = SiteSettingsRow(**{**DEFAULT_SITE_SETTINGS, **changes})
                db.add(row)
            else:
                for field, value in changes.items():
                    setattr(row, field, value)
            row.updated_at = _now()
            db.commit()
            db.refresh(row)
            return SiteSettings.model_validate(row)

    # Social links

    def list_social_links(self) -> list[SocialLink]:
        with self._session() as db:
            rows = db.query(SocialLinkRow).order_by(SocialLinkRow.order, SocialLinkRow.id).all()
            return [SocialLink.model_validate(r) for r in rows]

    def get_social_link(self, link_id: int) -> SocialLink | None:
        with self._session() as db:
            row = db.get(SocialLinkRow, link_id)
            return SocialLink.model_validate(row) if row else None

    def create_social_link(self, data: SocialLinkCreate) -> SocialLink:
        row = self._insert_row(SocialLinkRow(**data.model_dump()))
        return SocialLink.model_validate(row)

    def update_social_link(self, link_id: int, changes: dict[str, Any]) -> SocialLink | None:
        row = self._update_row(SocialLinkRow, link_id, changes)
        return SocialLink.model_validate(row) if row else None

    def delete_social_link(self, link_id: int) -> bool:
        return self._delete_row(SocialLinkRow, link_id)

    # Stream channels

    def list_stream_channels(self) -> list[StreamChannel]:
        with self._session() as db:
            rows = (
                db.query(StreamChannelRow)
                .order_by(StreamChannelRow.order, StreamChannelRow.id)
                .all()
            )
            return [StreamChannel.model_validate(r) for r in rows]

    def get_stream_channel(self, channel_id: int) -> StreamChannel | None:
        with self._session() as db:
            row = db.get(StreamChannelRow, channel_id)
            return StreamChannel.model_validate(row) if row else None

    def create_stream_channel(self, data: StreamChannelCreate) -> StreamChannel:
        row = self._insert_row(StreamChannelRow(**data.model_dump()))
        return StreamChannel.model_validate(row)

    def update_stream_channel(self, channel_id: int, changes: dict[str, Any]) -> StreamChannel | None:
        row = self._update_row(StreamChannelRow, channel_id, changes)
        return StreamChannel.model_validate(row) if row else None

    def delete_stream_channel(self, channel_id: int) -> bool:
        return self._delete_row(StreamChannelRow, channel_id)

    # Announcements

    def list_announcements(self) -> list[Announcement]:
        with self._session() as db:
            rows = db.query(AnnouncementRow).order_by(AnnouncementRow.id).all()
            return [Announcement.model_validate(r) for r in rows]

    def list_active_announcements(self, now: datetime | None = None) -> list[Announcement]:
        now = now or _now()
        with self._session() as db:
            rows = (
                db.query(AnnouncementRow)
                .filter(
                    AnnouncementRow.active.is_(True),
                    or_(AnnouncementRow.expires_at.is_(None), AnnouncementRow.expires_at > now),
                )
                .order_by(AnnouncementRow.id)
                .all()
            )
            return [Announcement.model_validate(r) for r in rows]

    def get_announcement(self, announcement_id: int) -> Announcement | None:
        with self._session() as db:
            row = db.get(AnnouncementRow, announcement_id)
            return Announcement.model_validate(row) if row else None

    def create_announcement(self, data: AnnouncementCreate) -> Announcement:
        row = self._insert_row(AnnouncementRow(created_at=_now(), **data.model_dump()))
        return Announcement.model_validate(row)

    def update_announcement(self, announcement_id: int, changes: dict[str, Any]) -> Announcement | None:
        row = self._update_row(AnnouncementRow, announcement_id, changes)
        return Announcement.model_validate(row) if row else None

    def delete_announcement(self, announcement_id: int) -> bool:
        return self._delete_row(AnnouncementRow, announcement_id)

    # Page content

    def list_page_content(self) -> list[PageContent]:
        with self._session() as db:
            rows = db.query(PageContentRow).order_by(PageContentRow.id).all()
            return [PageContent.model_validate(r) for r in rows]

    def get_page_content(self, section: str) -> PageContent | None:
        with self._session() as db:
            row = db.query(PageContentRow).filter(PageContentRow.section == section).first()
            return PageContent.model_validate(row) if row else None

    def update_page_content(self, section: str, content: dict[str, Any]) -> PageContent:
        with self._session() as db:
            row = db.query(PageContentRow).filter(PageContentRow.section == section).first()
            if row is None:
                row = PageContentRow(section=section, content=content)
                db.add(row)
            else:
                row.content = content
            row.updated_at = _now()
            db.commit()
            db.refresh(row)
            return PageContent.model_validate(row)

    def ping(self) -> bool:
        return check_db_connected(self._session_factory)
