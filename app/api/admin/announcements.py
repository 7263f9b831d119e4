"""Admin CRUD for announcements (all of them, including inactive and expired)."""

import logging

from fastapi import APIRouter, HTTPException, status

from app.api.deps import StorageDep
from app.schemas.announcements import Announcement, AnnouncementCreate, AnnouncementUpdate
from app.schemas.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_MESSAGE = "Announcement not found"


@router.get("", response_model=list[Announcement])
def list_announcements(storage: StorageDep) -> list[Announcement]:
    return storage.list_announcements()


@router.get("/{announcement_id}", response_model=Announcement)
def get_announcement(announcement_id: int, storage: StorageDep) -> Announcement:
    announcement = storage.get_announcement(announcement_id)
    if announcement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return announcement


@router.post("", response_model=Announcement, status_code=status.HTTP_201_CREATED)
def create_announcement(body: AnnouncementCreate, storage: StorageDep) -> Announcement:
    """createdAt is assigned here; any value sent by the client is ignored."""
    announcement = storage.create_announcement(body)
    logger.info("Announcement created: id=%s active=%s", announcement.id, announcement.active)
    return announcement


@router.put("/{announcement_id}", response_model=Announcement)
def update_announcement(
    announcement_id: int, body: AnnouncementUpdate, storage: StorageDep
) -> Announcement:
    announcement = storage.update_announcement(announcement_id, body.changes())
    if announcement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return announcement


@router.delete("/{announcement_id}", response_model=SuccessResponse, response_model_exclude_none=True)
def delete_announcement(announcement_id: int, storage: StorageDep) -> SuccessResponse:
    if not storage.delete_announcement(announcement_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    logger.info("Announcement deleted: id=%s", announcement_id)
    return SuccessResponse()
