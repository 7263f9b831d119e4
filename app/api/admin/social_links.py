"""Admin CRUD for social links."""

import logging

from fastapi import APIRouter, HTTPException, status

from app.api.deps import StorageDep
from app.schemas.common import SuccessResponse
from app.schemas.social_links import SocialLink, SocialLinkCreate, SocialLinkUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_MESSAGE = "Social link not found"


@router.get("", response_model=list[SocialLink])
def list_social_links(storage: StorageDep) -> list[SocialLink]:
    """All social links, ordered by display rank."""
    return storage.list_social_links()


@router.get("/{link_id}", response_model=SocialLink)
def get_social_link(link_id: int, storage: StorageDep) -> SocialLink:
    link = storage.get_social_link(link_id)
    if link is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return link


@router.post("", response_model=SocialLink, status_code=status.HTTP_201_CREATED)
def create_social_link(body: SocialLinkCreate, storage: StorageDep) -> SocialLink:
    link = storage.create_social_link(body)
    logger.info("Social link created: id=%s platform=%s", link.id, link.platform)
    return link


@router.put("/{link_id}", response_model=SocialLink)
def update_social_link(link_id: int, body: SocialLinkUpdate, storage: StorageDep) -> SocialLink:
    """Apply the supplied fields only. 404 if the link does not exist (never creates)."""
    link = storage.update_social_link(link_id, body.changes())
    if link is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return link


@router.delete("/{link_id}", response_model=SuccessResponse, response_model_exclude_none=True)
def delete_social_link(link_id: int, storage: StorageDep) -> SuccessResponse:
    if not storage.delete_social_link(link_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    logger.info("Social link deleted: id=%s", link_id)
    return SuccessResponse()
