from uuid import UUID

from fastapi import Depends, HTTPException

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.guest_lists.dtos import GuestListDTO
from src.guest_lists.repository.read_models import GuestListReadModel, SqlGuestListReadModel
from src.guest_lists.repository.write_models import GuestListWriteModel, SqlGuestListWriteModel


def get_guest_list_read_model() -> GuestListReadModel:
    """Dependency to get guest list read model instance."""
    return SqlGuestListReadModel()


def get_guest_list_write_model() -> GuestListWriteModel:
    """Dependency to get guest list write model instance."""
    return SqlGuestListWriteModel()


async def find_owned_guest_list(
    guest_list_id: UUID, host: HostDTO, read_model: GuestListReadModel
) -> GuestListDTO:
    """Lists of other hosts read as missing."""
    guest_list = await read_model.get_guest_list(guest_list_id)
    if not guest_list or guest_list.host_id != host.id:
        raise HTTPException(status_code=404, detail="Guest list not found")
    return guest_list


async def get_owned_guest_list(
    guest_list_id: UUID,
    host: HostDTO = Depends(require_host),
    read_model: GuestListReadModel = Depends(get_guest_list_read_model),
) -> GuestListDTO:
    return await find_owned_guest_list(guest_list_id, host, read_model)
