"""Account write models - return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.dtos import HOST_PROFILE_FIELDS, HostDTO, UserAlreadyExistsError, UserDTO
from src.accounts.repository.orm_models import Host, User
from src.config.database import async_session_manager

logger = logging.getLogger(__name__)


class AccountWriteModel(ABC):
    @abstractmethod
    async def create_user(self, email: str, password_hash: str) -> UserDTO:
        """
        Create a User and its Host profile together.
        Raises UserAlreadyExistsError when the email is taken.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_host_profile(self, host_id: UUID, changes: dict) -> HostDTO | None:
        """Apply a partial profile update. Returns None when the host is gone."""
        raise NotImplementedError


class SqlAccountWriteModel(AccountWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_user(self, email: str, password_hash: str) -> UserDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            existing = await session.execute(select(User.id).where(User.email == email))
            if existing.scalar_one_or_none() is not None:
                raise UserAlreadyExistsError(email)

            user = User(email=email, password=password_hash)
            session.add(user)
            await session.flush()
            session.add(Host(user_id=user.id, email=email))
            await session.flush()

            logger.info("Created user %s with host profile", user.id)
            return UserDTO.from_user(user)

    async def update_host_profile(self, host_id: UUID, changes: dict) -> HostDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            host = await session.get(Host, host_id)
            if not host:
                return None
            for field, value in changes.items():
                if field in HOST_PROFILE_FIELDS:
                    setattr(host, field, value)
            await session.flush()
            await session.refresh(host)
            return HostDTO.from_host(host)
