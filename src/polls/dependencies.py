from uuid import UUID

from fastapi import Depends, HTTPException

from src.accounts.dependencies import assert_owned_by, require_host
from src.accounts.dtos import HostDTO
from src.polls.dtos import PollDTO
from src.polls.repository.read_models import PollReadModel, SqlPollReadModel
from src.polls.repository.write_models import PollWriteModel, SqlPollWriteModel


def get_poll_read_model() -> PollReadModel:
    """Dependency to get poll read model instance."""
    return SqlPollReadModel()


def get_poll_write_model() -> PollWriteModel:
    """Dependency to get poll write model instance."""
    return SqlPollWriteModel()


async def get_poll_or_404(
    poll_id: UUID,
    read_model: PollReadModel = Depends(get_poll_read_model),
) -> PollDTO:
    poll = await read_model.get_poll(poll_id)
    if not poll:
        raise HTTPException(status_code=404, detail="Poll not found")
    return poll


async def get_owned_poll(
    poll_id: UUID,
    host: HostDTO = Depends(require_host),
    read_model: PollReadModel = Depends(get_poll_read_model),
) -> PollDTO:
    """The path's poll, provided the signed-in host owns it (404, then 403)."""
    poll = await get_poll_or_404(poll_id, read_model)
    assert_owned_by(poll.host_id, host)
    return poll
