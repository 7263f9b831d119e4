"""Admin read/write of page sections (hero, cta, ...)."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from app.api.deps import StorageDep
from app.schemas.page_content import SECTION_PATTERN, PageContent, PageContentUpdate

router = APIRouter()

SectionKey = Annotated[str, Path(pattern=SECTION_PATTERN, description="Section key, e.g. hero or cta")]


@router.get("", response_model=list[PageContent])
def list_page_content(storage: StorageDep) -> list[PageContent]:
    """Every saved section."""
    return storage.list_page_content()


@router.get("/{section}", response_model=PageContent)
def get_page_content(section: SectionKey, storage: StorageDep) -> PageContent:
    page = storage.get_page_content(section)
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page content not found")
    return page


@router.put("/{section}", response_model=PageContent)
def update_page_content(
    section: SectionKey, body: PageContentUpdate, storage: StorageDep
) -> PageContent:
    """Replace the section's content, creating the section on first write."""
    return storage.update_page_content(section, body.content)
