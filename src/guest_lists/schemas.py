from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from src.models.schemas import CamelModel


class GuestListCreate(CamelModel):
    name: str = Field(min_length=1)
    description: str | None = None


class GuestListUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


class GuestListResponse(CamelModel):
    id: UUID
    host_id: UUID
    name: str
    description: str | None = None
    member_count: int
    created_at: datetime
    updated_at: datetime


class MemberCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str | None = None


class MemberUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    phone: str | None = None


class MemberResponse(CamelModel):
    id: UUID
    guest_list_id: UUID
    name: str
    email: str
    phone: str | None = None
    created_at: datetime
