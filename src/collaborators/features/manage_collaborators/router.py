from dataclasses import asdict
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.accounts.dependencies import get_account_read_model, require_user
from src.accounts.dtos import UserDTO
from src.accounts.repository.read_models import AccountReadModel
from src.collaborators.dependencies import get_collaborator_read_model, get_collaborator_write_model
from src.collaborators.dtos import (
    CollaboratorPermission,
    CollaboratorRole,
    CollaboratorStatus,
    EventCollaboratorDTO,
)
from src.collaborators.repository.read_models import CollaboratorReadModel
from src.collaborators.repository.write_models import CollaboratorWriteModel
from src.collaborators.urls import (
    COLLABORATED_EVENTS_URL,
    EVENT_COLLABORATOR_URL,
    EVENT_COLLABORATORS_URL,
)
from src.events.dependencies import get_owned_event
from src.events.dtos import EventDTO
from src.events.schemas import EventResponse
from src.models.schemas import CamelModel, SuccessResponse

router = APIRouter()


class CollaboratorCreate(CamelModel):
    user_id: UUID
    role: CollaboratorRole = CollaboratorRole.COLLABORATOR
    permissions: list[CollaboratorPermission] = []


class CollaboratorUpdate(CamelModel):
    role: CollaboratorRole | None = None
    permissions: list[CollaboratorPermission] | None = None
    status: CollaboratorStatus | None = None


class CollaboratorResponse(CamelModel):
    id: UUID
    event_id: UUID
    user_id: UUID
    role: CollaboratorRole
    permissions: list[CollaboratorPermission]
    invited_by: UUID
    status: CollaboratorStatus
    created_at: datetime
    updated_at: datetime


class CollaboratedEventResponse(CollaboratorResponse):
    event: EventResponse


async def get_event_collaborator(
    collaborator_id: UUID,
    event: EventDTO = Depends(get_owned_event),
    read_model: CollaboratorReadModel = Depends(get_collaborator_read_model),
) -> EventCollaboratorDTO:
    collaborator = await read_model.get_collaborator(collaborator_id)
    if not collaborator or collaborator.event_id != event.id:
        raise HTTPException(status_code=404, detail="Collaborator not found")
    return collaborator


@router.get(EVENT_COLLABORATORS_URL, response_model=list[CollaboratorResponse])
async def list_collaborators(
    event: EventDTO = Depends(get_owned_event),
    read_model: CollaboratorReadModel = Depends(get_collaborator_read_model),
):
    return await read_model.list_for_event(event.id)


@router.post(EVENT_COLLABORATORS_URL, response_model=CollaboratorResponse)
async def add_collaborator(
    body: CollaboratorCreate,
    event: EventDTO = Depends(get_owned_event),
    user: UserDTO = Depends(require_user),
    account_read_model: AccountReadModel = Depends(get_account_read_model),
    write_model: CollaboratorWriteModel = Depends(get_collaborator_write_model),
):
    """Add a registered user to the event. Permissions are recorded, not enforced."""
    if not await account_read_model.get_user(body.user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return await write_model.add_collaborator(
        event.id,
        user_id=body.user_id,
        invited_by=user.id,
        role=body.role,
        permissions=body.permissions,
    )


@router.put(EVENT_COLLABORATOR_URL, response_model=CollaboratorResponse)
async def update_collaborator(
    body: CollaboratorUpdate,
    collaborator: EventCollaboratorDTO = Depends(get_event_collaborator),
    write_model: CollaboratorWriteModel = Depends(get_collaborator_write_model),
):
    changes = {
        field: value
        for field, value in body.model_dump(exclude_unset=True).items()
        if value is not None
    }
    updated = await write_model.update_collaborator(collaborator.id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Collaborator not found")
    return updated


@router.delete(EVENT_COLLABORATOR_URL, response_model=SuccessResponse)
async def remove_collaborator(
    collaborator: EventCollaboratorDTO = Depends(get_event_collaborator),
    write_model: CollaboratorWriteModel = Depends(get_collaborator_write_model),
) -> SuccessResponse:
    await write_model.remove_collaborator(collaborator.id)
    return SuccessResponse(message="Collaborator removed successfully")


@router.get(COLLABORATED_EVENTS_URL, response_model=list[CollaboratedEventResponse])
async def list_collaborated_events(
    user: UserDTO = Depends(require_user),
    read_model: CollaboratorReadModel = Depends(get_collaborator_read_model),
):
    collaborations = await read_model.list_collaborated_events(user.id)
    return [
        {**asdict(item.collaboration), "event": item.event}
        for item in collaborations
    ]
