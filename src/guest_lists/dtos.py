from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.guest_lists.repository.orm_models import GuestList, GuestListMember


@dataclass(frozen=True)
class GuestListDTO:
    id: UUID
    host_id: UUID
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime
    member_count: int = 0

    @classmethod
    def from_guest_list(cls, guest_list: "GuestList", member_count: int = 0) -> "GuestListDTO":
        return cls(
            id=guest_list.id,
            host_id=guest_list.host_id,
            name=guest_list.name,
            description=guest_list.description,
            created_at=guest_list.created_at,
            updated_at=guest_list.updated_at,
            member_count=member_count,
        )


@dataclass(frozen=True)
class GuestListMemberDTO:
    id: UUID
    guest_list_id: UUID
    name: str
    email: str
    phone: str | None
    created_at: datetime

    @classmethod
    def from_member(cls, member: "GuestListMember") -> "GuestListMemberDTO":
        return cls(
            id=member.id,
            guest_list_id=member.guest_list_id,
            name=member.name,
            email=member.email,
            phone=member.phone,
            created_at=member.created_at,
        )
