import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.dtos import HostDTO, UserCredentialsDTO, UserDTO
from src.accounts.repository.orm_models import Host, User
from src.config.database import async_session_manager


class AccountReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_user(self, user_id: UUID) -> UserDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_user_by_email(self, email: str) -> UserDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_credentials(self, email: str) -> UserCredentialsDTO | None:
        """User plus stored password hash, for sign-in only."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_host(self, host_id: UUID) -> HostDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_host_by_user_id(self, user_id: UUID) -> HostDTO | None:
        raise NotImplementedError


class SqlAccountReadModel(AccountReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_user(self, user_id: UUID) -> UserDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            user = await session.get(User, user_id)
            return UserDTO.from_user(user) if user else None

    async def get_user_by_email(self, email: str) -> UserDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()
            return UserDTO.from_user(user) if user else None

    async def get_credentials(self, email: str) -> UserCredentialsDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()
            if not user:
                return None
            return UserCredentialsDTO(user=UserDTO.from_user(user), password_hash=user.password)

    async def get_host(self, host_id: UUID) -> HostDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            host = await session.get(Host, host_id)
            return HostDTO.from_host(host) if host else None

    async def get_host_by_user_id(self, user_id: UUID) -> HostDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Host).where(Host.user_id == user_id))
            host = result.scalar_one_or_none()
            return HostDTO.from_host(host) if host else None
