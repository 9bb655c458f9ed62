from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.event_groups.dependencies import (
    get_event_group_read_model,
    get_event_group_write_model,
    get_owned_group,
)
from src.event_groups.dtos import EventGroupDTO
from src.event_groups.repository.read_models import EventGroupReadModel
from src.event_groups.repository.write_models import EventGroupWriteModel
from src.event_groups.urls import (
    EVENT_GROUP_GUEST_LIST_URL,
    EVENT_GROUP_GUEST_LISTS_URL,
    EVENT_GROUP_URL,
    EVENT_GROUPS_URL,
)
from src.guest_lists.dependencies import find_owned_guest_list, get_guest_list_read_model
from src.guest_lists.repository.read_models import GuestListReadModel
from src.models.schemas import CamelModel, SuccessResponse

router = APIRouter()


class EventGroupCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str | None = None


class EventGroupUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None


class EventGroupResponse(CamelModel):
    id: UUID
    host_id: UUID
    title: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime


class GuestListLink(CamelModel):
    guest_list_id: UUID


class GuestListLinkResponse(CamelModel):
    id: UUID
    event_group_id: UUID
    guest_list_id: UUID
    created_at: datetime


@router.get(EVENT_GROUPS_URL, response_model=list[EventGroupResponse])
async def list_event_groups(
    host: HostDTO = Depends(require_host),
    read_model: EventGroupReadModel = Depends(get_event_group_read_model),
):
    return await read_model.list_host_groups(host.id)


@router.post(EVENT_GROUPS_URL, response_model=EventGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_event_group(
    body: EventGroupCreate,
    host: HostDTO = Depends(require_host),
    write_model: EventGroupWriteModel = Depends(get_event_group_write_model),
):
    return await write_model.create_group(host.id, body.title, body.description)


@router.put(EVENT_GROUP_URL, response_model=EventGroupResponse)
async def update_event_group(
    body: EventGroupUpdate,
    group: EventGroupDTO = Depends(get_owned_group),
    write_model: EventGroupWriteModel = Depends(get_event_group_write_model),
):
    changes = body.model_dump(exclude_unset=True)
    if "title" in changes and changes["title"] is None:
        raise HTTPException(status_code=400, detail="title cannot be empty")
    updated = await write_model.update_group(group.id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Event group not found")
    return updated


@router.delete(EVENT_GROUP_URL, response_model=SuccessResponse)
async def delete_event_group(
    group: EventGroupDTO = Depends(get_owned_group),
    write_model: EventGroupWriteModel = Depends(get_event_group_write_model),
) -> SuccessResponse:
    await write_model.delete_group(group.id)
    return SuccessResponse(message="Event group deleted successfully")


@router.get(EVENT_GROUP_GUEST_LISTS_URL, response_model=list[GuestListLinkResponse])
async def list_group_guest_lists(
    group: EventGroupDTO = Depends(get_owned_group),
    read_model: EventGroupReadModel = Depends(get_event_group_read_model),
):
    return await read_model.list_guest_list_links(group.id)


@router.post(
    EVENT_GROUP_GUEST_LISTS_URL,
    response_model=GuestListLinkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def link_guest_list(
    body: GuestListLink,
    group: EventGroupDTO = Depends(get_owned_group),
    host: HostDTO = Depends(require_host),
    guest_list_read_model: GuestListReadModel = Depends(get_guest_list_read_model),
    write_model: EventGroupWriteModel = Depends(get_event_group_write_model),
):
    guest_list = await find_owned_guest_list(body.guest_list_id, host, guest_list_read_model)
    return await write_model.link_guest_list(group.id, guest_list.id)


@router.delete(EVENT_GROUP_GUEST_LIST_URL, response_model=SuccessResponse)
async def unlink_guest_list(
    guest_list_id: UUID,
    group: EventGroupDTO = Depends(get_owned_group),
    write_model: EventGroupWriteModel = Depends(get_event_group_write_model),
) -> SuccessResponse:
    await write_model.unlink_guest_list(group.id, guest_list_id)
    return SuccessResponse(message="Guest list removed from event group")
