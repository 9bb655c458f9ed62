import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.event_groups.dependencies import find_owned_group, get_event_group_read_model
from src.event_groups.repository.read_models import EventGroupReadModel
from src.events.dtos import EventCreateDTO
from src.events.schemas import EventResponse
from src.models.schemas import CamelModel
from src.polls.dependencies import get_owned_poll, get_poll_write_model
from src.polls.dtos import PollAlreadyConvertedError, PollDTO
from src.polls.repository.write_models import PollWriteModel
from src.polls.schemas import PollResponse, poll_payload
from src.polls.urls import CONVERT_POLL_URL

logger = logging.getLogger(__name__)

router = APIRouter()


class ConvertedEventData(CamelModel):
    """Event fields for the new event; title and description default to the poll's."""

    title: str | None = None
    description: str | None = None
    start_date_time: datetime | None = None
    end_date_time: datetime | None = None
    is_all_day: bool = False
    location: str | None = None
    exact_address: str | None = None
    custom_directions: str | None = None
    group_id: UUID | None = None

    def to_dto(self, poll: PollDTO) -> EventCreateDTO:
        return EventCreateDTO(
            title=self.title or poll.title,
            description=self.description or poll.description,
            start_date_time=self.start_date_time,
            end_date_time=self.end_date_time,
            is_all_day=self.is_all_day,
            location=self.location,
            exact_address=self.exact_address,
            custom_directions=self.custom_directions,
            group_id=self.group_id,
        )


class ConvertPoll(CamelModel):
    event_data: ConvertedEventData = ConvertedEventData()


class ConvertPollResponse(CamelModel):
    poll: PollResponse
    event: EventResponse


@router.post(CONVERT_POLL_URL, response_model=ConvertPollResponse)
async def convert_poll_to_event(
    body: ConvertPoll,
    poll: PollDTO = Depends(get_owned_poll),
    host: HostDTO = Depends(require_host),
    write_model: PollWriteModel = Depends(get_poll_write_model),
    group_read_model: EventGroupReadModel = Depends(get_event_group_read_model),
):
    """Turn the poll into a real event. A poll can be converted only once."""
    if not body.event_data.start_date_time:
        raise HTTPException(status_code=400, detail="Start date and time is required")
    if body.event_data.group_id is not None:
        await find_owned_group(body.event_data.group_id, host, group_read_model)

    try:
        converted = await write_model.convert_to_event(poll.id, body.event_data.to_dto(poll))
    except PollAlreadyConvertedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not converted:
        raise HTTPException(status_code=404, detail="Poll not found")

    converted_poll, event = converted
    return {"poll": poll_payload(converted_poll), "event": event}
