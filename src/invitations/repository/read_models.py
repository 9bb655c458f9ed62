import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.invitations.dtos import InvitationDTO
from src.invitations.repository.orm_models import Invitation


class InvitationReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_by_token(self, token: str) -> InvitationDTO | None:
        """Absent tokens return None; callers turn that into a 404."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> InvitationDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_for_event(self, event_id: UUID) -> list[InvitationDTO]:
        raise NotImplementedError


class SqlInvitationReadModel(InvitationReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_by_token(self, token: str) -> InvitationDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Invitation).where(Invitation.token == token))
            invitation = result.scalar_one_or_none()
            return InvitationDTO.from_invitation(invitation) if invitation else None

    async def get_by_id(self, invitation_id: UUID) -> InvitationDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            invitation = await session.get(Invitation, invitation_id)
            return InvitationDTO.from_invitation(invitation) if invitation else None

    async def list_for_event(self, event_id: UUID) -> list[InvitationDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(Invitation)
                .where(Invitation.event_id == event_id)
                .order_by(Invitation.created_at)
            )
            return [InvitationDTO.from_invitation(row) for row in result.scalars().all()]
