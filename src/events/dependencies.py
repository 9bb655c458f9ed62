from uuid import UUID

from fastapi import Depends, HTTPException

from src.accounts.dependencies import assert_owned_by, require_host
from src.accounts.dtos import HostDTO
from src.events.dtos import EventDTO
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.events.repository.write_models import EventWriteModel, SqlEventWriteModel


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


def get_event_write_model() -> EventWriteModel:
    """Dependency to get event write model instance."""
    return SqlEventWriteModel()


async def get_event_or_404(
    event_id: UUID,
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventDTO:
    event = await read_model.get_event(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


async def get_owned_event(
    event_id: UUID,
    host: HostDTO = Depends(require_host),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventDTO:
    """The path's event, provided the signed-in host owns it (404, then 403)."""
    event = await get_event_or_404(event_id, read_model)
    assert_owned_by(event.host_id, host)
    return event
