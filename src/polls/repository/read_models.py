import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.polls.dtos import PollDTO, PollResultsDTO, PollVoteDTO, tally_votes
from src.polls.repository.orm_models import Poll, PollVote


class PollReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_poll(self, poll_id: UUID) -> PollDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_host_polls(self, host_id: UUID) -> list[PollDTO]:
        """Newest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list_votes(self, poll_id: UUID) -> list[PollVoteDTO]:
        raise NotImplementedError

    async def get_results(self, poll_id: UUID) -> PollResultsDTO | None:
        """The poll with per-option vote counts, computed on read."""
        poll = await self.get_poll(poll_id)
        if not poll:
            return None
        votes = await self.list_votes(poll_id)
        return PollResultsDTO(
            poll=poll,
            vote_counts=tally_votes(poll.options, votes),
            total_votes=len(votes),
        )


class SqlPollReadModel(PollReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_poll(self, poll_id: UUID) -> PollDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            poll = await session.get(Poll, poll_id)
            return PollDTO.from_poll(poll) if poll else None

    async def list_host_polls(self, host_id: UUID) -> list[PollDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(Poll).where(Poll.host_id == host_id).order_by(Poll.created_at.desc())
            )
            return [PollDTO.from_poll(row) for row in result.scalars().all()]

    async def list_votes(self, poll_id: UUID) -> list[PollVoteDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(PollVote).where(PollVote.poll_id == poll_id).order_by(PollVote.created_at)
            )
            return [PollVoteDTO.from_vote(row) for row in result.scalars().all()]
