"""Admin read/write of the site theme."""

from fastapi import APIRouter

from app.api.deps import StorageDep
from app.schemas.site_settings import SiteSettings, SiteSettingsUpdate, default_site_settings

router = APIRouter()


@router.get("", response_model=SiteSettings)
def get_site_settings(storage: StorageDep) -> SiteSettings:
    return storage.get_site_settings() or default_site_settings()


# The dashboard saves with POST; PUT is the documented verb. Both upsert.
@router.api_route("", methods=["PUT", "POST"], response_model=SiteSettings)
def update_site_settings(body: SiteSettingsUpdate, storage: StorageDep) -> SiteSettings:
    """Merge the supplied fields into the stored theme, creating it from defaults on first save."""
    return storage.update_site_settings(body.changes())
