from uuid import UUID

from fastapi import Depends, HTTPException

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.event_groups.dtos import EventGroupDTO
from src.event_groups.repository.read_models import EventGroupReadModel, SqlEventGroupReadModel
from src.event_groups.repository.write_models import EventGroupWriteModel, SqlEventGroupWriteModel


def get_event_group_read_model() -> EventGroupReadModel:
    """Dependency to get event group read model instance."""
    return SqlEventGroupReadModel()


def get_event_group_write_model() -> EventGroupWriteModel:
    """Dependency to get event group write model instance."""
    return SqlEventGroupWriteModel()


async def find_owned_group(
    group_id: UUID, host: HostDTO, read_model: EventGroupReadModel
) -> EventGroupDTO:
    """Groups of other hosts read as missing."""
    group = await read_model.get_group(group_id)
    if not group or group.host_id != host.id:
        raise HTTPException(status_code=404, detail="Event group not found")
    return group


async def get_owned_group(
    group_id: UUID,
    host: HostDTO = Depends(require_host),
    read_model: EventGroupReadModel = Depends(get_event_group_read_model),
) -> EventGroupDTO:
    return await find_owned_group(group_id, host, read_model)
