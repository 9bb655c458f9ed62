"""Invitation write models - return DTOs, never ORM models."""

import logging
import secrets
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.invitations.dtos import GuestDTO, InvitationDTO, RSVPStatus
from src.invitations.repository.orm_models import Invitation

logger = logging.getLogger(__name__)

# 32 random bytes, base64url encoded
TOKEN_BYTES = 32


def generate_token() -> str:
    return secrets.token_urlsafe(TOKEN_BYTES)


class InvitationWriteModel(ABC):
    @abstractmethod
    async def create_invitation(
        self,
        event_id: UUID,
        email: str | None = None,
        phone: str | None = None,
        name: str | None = None,
    ) -> InvitationDTO:
        """
        Issue a new invitation with a fresh token.
        Does not check for an existing invitation with the same email.
        """
        raise NotImplementedError

    @abstractmethod
    async def create_invitations(self, event_id: UUID, guests: list[GuestDTO]) -> list[InvitationDTO]:
        """Issue one invitation per guest, in order."""
        raise NotImplementedError

    @abstractmethod
    async def update_rsvp(self, token: str, status: RSVPStatus) -> InvitationDTO | None:
        """Overwrite the RSVP status. Any status may follow any other."""
        raise NotImplementedError

    @abstractmethod
    async def set_suspended(self, invitation_id: UUID, suspended: bool) -> InvitationDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def set_blocked(self, invitation_id: UUID, blocked: bool) -> InvitationDTO | None:
        """Blocking also blocks the guest from the event chat."""
        raise NotImplementedError

    @abstractmethod
    async def remove_invitation(self, invitation_id: UUID) -> bool:
        raise NotImplementedError


class SqlInvitationWriteModel(InvitationWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_invitation(
        self,
        event_id: UUID,
        email: str | None = None,
        phone: str | None = None,
        name: str | None = None,
    ) -> InvitationDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            invitation = Invitation(
                event_id=event_id,
                token=generate_token(),
                email=email,
                phone=phone,
                name=name,
                rsvp_status=RSVPStatus.PENDING,
            )
            session.add(invitation)
            await session.flush()
            await session.refresh(invitation)
            return InvitationDTO.from_invitation(invitation)

    async def create_invitations(self, event_id: UUID, guests: list[GuestDTO]) -> list[InvitationDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            rows = [
                Invitation(
                    event_id=event_id,
                    token=generate_token(),
                    email=guest.email,
                    phone=guest.phone,
                    name=guest.name,
                    rsvp_status=RSVPStatus.PENDING,
                )
                for guest in guests
            ]
            session.add_all(rows)
            await session.flush()
            for row in rows:
                await session.refresh(row)
            if rows:
                logger.info("Created %d invitations for event %s", len(rows), event_id)
            return [InvitationDTO.from_invitation(row) for row in rows]

    async def update_rsvp(self, token: str, status: RSVPStatus) -> InvitationDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Invitation).where(Invitation.token == token))
            invitation = result.scalar_one_or_none()
            if not invitation:
                return None
            invitation.rsvp_status = status
            await session.flush()
            await session.refresh(invitation)
            return InvitationDTO.from_invitation(invitation)

    async def set_suspended(self, invitation_id: UUID, suspended: bool) -> InvitationDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            invitation = await session.get(Invitation, invitation_id)
            if not invitation:
                return None
            invitation.is_suspended = suspended
            await session.flush()
            await session.refresh(invitation)
            return InvitationDTO.from_invitation(invitation)

    async def set_blocked(self, invitation_id: UUID, blocked: bool) -> InvitationDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            invitation = await session.get(Invitation, invitation_id)
            if not invitation:
                return None
            invitation.is_blocked = blocked
            invitation.message_blocked = blocked
            await session.flush()
            await session.refresh(invitation)
            return InvitationDTO.from_invitation(invitation)

    async def remove_invitation(self, invitation_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            invitation = await session.get(Invitation, invitation_id)
            if not invitation:
                return False
            await session.delete(invitation)
            await session.flush()
            return True
