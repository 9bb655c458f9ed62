"""Poll write models - return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import EventCreateDTO, EventDTO
from src.events.repository.write_models import SqlEventWriteModel
from src.polls.dtos import (
    PollAlreadyConvertedError,
    PollCreateDTO,
    PollDTO,
    PollStatus,
    PollVoteDTO,
    VoterIdentity,
)
from src.polls.repository.orm_models import Poll, PollVote

logger = logging.getLogger(__name__)

EDITABLE_POLL_FIELDS = ("title", "description", "options", "allow_multiple_choices", "end_date")


class PollWriteModel(ABC):
    @abstractmethod
    async def create_poll(self, host_id: UUID, data: PollCreateDTO) -> PollDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_poll(self, poll_id: UUID, changes: dict) -> PollDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def delete_poll(self, poll_id: UUID) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def end_poll(self, poll_id: UUID) -> PollDTO | None:
        """
        Mark the poll ended. Ending an ended poll is a no-op.
        Raises PollAlreadyConvertedError for converted polls.
        """
        raise NotImplementedError

    @abstractmethod
    async def record_vote(
        self, poll_id: UUID, voter: VoterIdentity, selected_options: list[str]
    ) -> PollVoteDTO:
        """Insert the voter's ballot, or overwrite the selection of their earlier one."""
        raise NotImplementedError

    @abstractmethod
    async def convert_to_event(
        self, poll_id: UUID, data: EventCreateDTO
    ) -> tuple[PollDTO, EventDTO] | None:
        """
        Create an event under the poll's host and stamp the poll as converted,
        both in one transaction.
        Raises PollAlreadyConvertedError when the poll was converted before.
        """
        raise NotImplementedError


class SqlPollWriteModel(PollWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_poll(self, host_id: UUID, data: PollCreateDTO) -> PollDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            poll = Poll(host_id=host_id, status=PollStatus.ACTIVE, **asdict(data))
            session.add(poll)
            await session.flush()
            await session.refresh(poll)
            logger.info("Created poll %s for host %s", poll.id, host_id)
            return PollDTO.from_poll(poll)

    async def update_poll(self, poll_id: UUID, changes: dict) -> PollDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            poll = await session.get(Poll, poll_id)
            if not poll:
                return None
            for field, value in changes.items():
                if field in EDITABLE_POLL_FIELDS:
                    setattr(poll, field, value)
            await session.flush()
            await session.refresh(poll)
            return PollDTO.from_poll(poll)

    async def delete_poll(self, poll_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            poll = await session.get(Poll, poll_id)
            if not poll:
                return False
            await session.delete(poll)
            await session.flush()
            logger.info("Deleted poll %s", poll_id)
            return True

    async def end_poll(self, poll_id: UUID) -> PollDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            poll = await session.get(Poll, poll_id)
            if not poll:
                return None
            if PollStatus(poll.status) == PollStatus.CONVERTED:
                raise PollAlreadyConvertedError(poll_id)
            poll.status = PollStatus.ENDED
            await session.flush()
            await session.refresh(poll)
            return PollDTO.from_poll(poll)

    async def record_vote(
        self, poll_id: UUID, voter: VoterIdentity, selected_options: list[str]
    ) -> PollVoteDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            query = select(PollVote).where(PollVote.poll_id == poll_id)
            if voter.user_id is not None:
                query = query.where(PollVote.user_id == voter.user_id)
            else:
                query = query.where(
                    PollVote.user_id.is_(None), PollVote.voter_email == voter.voter_email
                )
            vote = (await session.execute(query)).scalars().first()

            if vote:
                vote.selected_options = list(selected_options)
            else:
                vote = PollVote(
                    poll_id=poll_id,
                    user_id=voter.user_id,
                    voter_email=voter.voter_email,
                    voter_name=voter.voter_name,
                    selected_options=list(selected_options),
                )
                session.add(vote)
            await session.flush()
            await session.refresh(vote)
            return PollVoteDTO.from_vote(vote)

    async def convert_to_event(
        self, poll_id: UUID, data: EventCreateDTO
    ) -> tuple[PollDTO, EventDTO] | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            poll = await session.get(Poll, poll_id)
            if not poll:
                return None
            if PollStatus(poll.status) == PollStatus.CONVERTED:
                raise PollAlreadyConvertedError(poll_id)

            event = await SqlEventWriteModel(session_overwrite=session).create_event(
                poll.host_id, data
            )
            poll.status = PollStatus.CONVERTED
            poll.converted_event_id = event.id
            await session.flush()
            await session.refresh(poll)
            logger.info("Converted poll %s into event %s", poll_id, event.id)
            return PollDTO.from_poll(poll), event
