"""Admin routes. Everything except login/logout/me is gated by require_admin."""

from fastapi import APIRouter, Depends

from app.api.admin import announcements, auth, page_content, site_settings, social_links, stream_channels
from app.api.deps import require_admin

_admin_only = [Depends(require_admin)]

router = APIRouter()
router.include_router(auth.router, tags=["admin-auth"])
router.include_router(
    social_links.router, prefix="/social-links", tags=["admin"], dependencies=_admin_only
)
router.include_router(
    stream_channels.router, prefix="/stream-channels", tags=["admin"], dependencies=_admin_only
)
router.include_router(
    site_settings.router, prefix="/site-settings", tags=["admin"], dependencies=_admin_only
)
router.include_router(
    announcements.router, prefix="/announcements", tags=["admin"], dependencies=_admin_only
)
router.include_router(
    page_content.router, prefix="/page-content", tags=["admin"], dependencies=_admin_only
)
