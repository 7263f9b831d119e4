"""SQLAlchemy ORM models."""

from app.models.announcement import Announcement
from app.models.auth_session import AuthSession
from app.models.base import Base
from app.models.page_content import PageContent
from app.models.site_settings import SiteSettings
from app.models.social_link import SocialLink
from app.models.stream_channel import StreamChannel
from app.models.user import User

__all__ = [
    "Announcement",
    "AuthSession",
    "Base",
    "PageContent",
    "SiteSettings",
    "SocialLink",
    "StreamChannel",
    "User",
]
