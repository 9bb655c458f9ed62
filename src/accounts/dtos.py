from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.accounts.repository.orm_models import Host, User


class UserAlreadyExistsError(Exception):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User with email '{email}' already exists")


HOST_PROFILE_FIELDS = (
    "first_name",
    "last_name",
    "preferred_name",
    "contact",
    "picture_url",
    "facebook_url",
    "instagram_url",
    "twitter_url",
    "linkedin_url",
    "website_url",
    "personal_statement",
)


@dataclass(frozen=True)
class UserDTO:
    id: UUID
    email: str

    @classmethod
    def from_user(cls, user: "User") -> "UserDTO":
        return cls(id=user.id, email=user.email)


@dataclass(frozen=True)
class UserCredentialsDTO:
    user: UserDTO
    password_hash: str


@dataclass(frozen=True)
class HostDTO:
    id: UUID
    user_id: UUID
    email: str
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    preferred_name: str | None = None
    contact: str | None = None
    picture_url: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None
    linkedin_url: str | None = None
    website_url: str | None = None
    personal_statement: str | None = None
    verified: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def display_name(self) -> str:
        """Name shown to guests in emails."""
        full_name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return self.preferred_name or full_name or self.name or self.email

    @classmethod
    def from_host(cls, host: "Host") -> "HostDTO":
        return cls(
            id=host.id,
            user_id=host.user_id,
            email=host.email,
            name=host.name,
            verified=bool(host.verified),
            created_at=host.created_at,
            updated_at=host.updated_at,
            **{field: getattr(host, field) for field in HOST_PROFILE_FIELDS},
        )
