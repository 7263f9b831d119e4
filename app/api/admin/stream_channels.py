"""Admin CRUD for stream channels."""

import logging

from fastapi import APIRouter, HTTPException, status

from app.api.deps import StorageDep
from app.schemas.common import SuccessResponse
from app.schemas.stream_channels import StreamChannel, StreamChannelCreate, StreamChannelUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_MESSAGE = "Stream channel not found"


@router.get("", response_model=list[StreamChannel])
def list_stream_channels(storage: StorageDep) -> list[StreamChannel]:
    return storage.list_stream_channels()


@router.get("/{channel_id}", response_model=StreamChannel)
def get_stream_channel(channel_id: int, storage: StorageDep) -> StreamChannel:
    channel = storage.get_stream_channel(channel_id)
    if channel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return channel


@router.post("", response_model=StreamChannel, status_code=status.HTTP_201_CREATED)
def create_stream_channel(body: StreamChannelCreate, storage: StorageDep) -> StreamChannel:
    channel = storage.create_stream_channel(body)
    logger.info("Stream channel created: id=%s type=%s", channel.id, channel.type)
    return channel


@router.put("/{channel_id}", response_model=StreamChannel)
def update_stream_channel(
    channel_id: int, body: StreamChannelUpdate, storage: StorageDep
) -> StreamChannel:
    channel = storage.update_stream_channel(channel_id, body.changes())
    if channel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return channel


@router.delete("/{channel_id}", response_model=SuccessResponse, response_model_exclude_none=True)
def delete_stream_channel(channel_id: int, storage: StorageDep) -> SuccessResponse:
    if not storage.delete_stream_channel(channel_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    logger.info("Stream channel deleted: id=%s", channel_id)
    return SuccessResponse()
