"""Pydantic request/response schemas."""

from app.schemas.announcements import Announcement, AnnouncementCreate, AnnouncementUpdate
from app.schemas.auth import AdminIdentity, ChangePasswordRequest, LoginRequest, UserRecord
from app.schemas.common import ErrorResponse, FallbackNotice, SuccessResponse
from app.schemas.health import HealthResponse
from app.schemas.page_content import PageContent, PageContentUpdate
from app.schemas.site_settings import SiteSettings, SiteSettingsUpdate
from app.schemas.social_links import SocialLink, SocialLinkCreate, SocialLinkUpdate
from app.schemas.stream_channels import StreamChannel, StreamChannelCreate, StreamChannelUpdate

__all__ = [
    "AdminIdentity",
    "Announcement",
    "AnnouncementCreate",
    "AnnouncementUpdate",
    "ChangePasswordRequest",
    "ErrorResponse",
    "FallbackNotice",
    "HealthResponse",
    "LoginRequest",
    "PageContent",
    "PageContentUpdate",
    "SiteSettings",
    "SiteSettingsUpdate",
    "SocialLink",
    "SocialLinkCreate",
    "SocialLinkUpdate",
    "StreamChannel",
    "StreamChannelCreate",
    "StreamChannelUpdate",
    "SuccessResponse",
    "UserRecord",
]
