from dataclasses import asdict
from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.models.schemas import CamelModel
from src.polls.dtos import PollDTO, PollResultsDTO, PollStatus


class PollResponse(CamelModel):
    id: UUID
    host_id: UUID
    title: str
    description: str | None = None
    options: list[str]
    allow_multiple_choices: bool
    end_date: datetime
    status: PollStatus
    converted_event_id: UUID | None = None
    created_at: datetime
    updated_at: datetime


class PollResultsResponse(PollResponse):
    vote_counts: list[int]
    total_votes: int


class PollNotification(CamelModel):
    send_email: bool = False
    notify_guest_list_ids: list[UUID] = Field(default_factory=list)


def poll_payload(poll: PollDTO) -> dict:
    """Poll as readers see it, with the effective status."""
    return {**asdict(poll), "status": poll.effective_status()}


def results_payload(results: PollResultsDTO) -> dict:
    return {
        **poll_payload(results.poll),
        "vote_counts": results.vote_counts,
        "total_votes": results.total_votes,
    }
