from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.polls.repository.orm_models import Poll, PollVote


class PollStatus(str, Enum):
    ACTIVE = "active"
    ENDED = "ended"
    CONVERTED = "converted"


class PollNotOpenError(Exception):
    """Raised when voting on a poll that is not accepting votes."""


class PollAlreadyConvertedError(Exception):
    def __init__(self, poll_id: UUID) -> None:
        self.poll_id = poll_id
        super().__init__(f"Poll {poll_id} has already been converted to an event")


MIN_POLL_OPTIONS = 2


def clean_options(options: list[str]) -> list[str]:
    """Trim options and drop blanks, keeping order."""
    return [option.strip() for option in options if option and option.strip()]


@dataclass(frozen=True)
class PollDTO:
    id: UUID
    host_id: UUID
    title: str
    description: str | None
    options: list[str]
    allow_multiple_choices: bool
    end_date: datetime
    status: PollStatus
    converted_event_id: UUID | None
    created_at: datetime
    updated_at: datetime

    def has_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) > self.end_date

    def effective_status(self, now: datetime | None = None) -> PollStatus:
        """Status as seen by readers; an active poll past its end date reads as ended."""
        if self.status == PollStatus.ACTIVE and self.has_expired(now):
            return PollStatus.ENDED
        return self.status

    def ensure_open(self, now: datetime | None = None) -> None:
        if self.status != PollStatus.ACTIVE:
            raise PollNotOpenError("Poll is not active")
        if self.has_expired(now):
            raise PollNotOpenError("Poll has ended")

    @classmethod
    def from_poll(cls, poll: "Poll") -> "PollDTO":
        return cls(
            id=poll.id,
            host_id=poll.host_id,
            title=poll.title,
            description=poll.description,
            options=list(poll.options),
            allow_multiple_choices=bool(poll.allow_multiple_choices),
            end_date=poll.end_date,
            status=PollStatus(poll.status),
            converted_event_id=poll.converted_event_id,
            created_at=poll.created_at,
            updated_at=poll.updated_at,
        )


@dataclass(frozen=True)
class PollVoteDTO:
    id: UUID
    poll_id: UUID
    user_id: UUID | None
    voter_email: str | None
    voter_name: str | None
    selected_options: list[str]
    created_at: datetime

    @classmethod
    def from_vote(cls, vote: "PollVote") -> "PollVoteDTO":
        return cls(
            id=vote.id,
            poll_id=vote.poll_id,
            user_id=vote.user_id,
            voter_email=vote.voter_email,
            voter_name=vote.voter_name,
            selected_options=list(vote.selected_options),
            created_at=vote.created_at,
        )


@dataclass(frozen=True)
class VoterIdentity:
    """Who is voting: a signed-in user, or an anonymous voter keyed by email."""

    user_id: UUID | None = None
    voter_email: str | None = None
    voter_name: str | None = None

    def __post_init__(self) -> None:
        if self.user_id is None and not self.voter_email:
            raise ValueError("A vote needs either a user or a voter email")


@dataclass(frozen=True)
class PollResultsDTO:
    poll: PollDTO
    vote_counts: list[int] = field(default_factory=list)
    total_votes: int = 0


def tally_votes(options: list[str], votes: list[PollVoteDTO]) -> list[int]:
    """Count, per option index, the votes whose selection contains that index."""
    return [
        sum(1 for vote in votes if str(index) in vote.selected_options)
        for index in range(len(options))
    ]


@dataclass(frozen=True)
class PollCreateDTO:
    title: str
    options: list[str]
    end_date: datetime
    description: str | None = None
    allow_multiple_choices: bool = False
