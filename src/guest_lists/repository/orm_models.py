from datetime import datetime
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp, UTCDateTime, utc_now


class GuestList(Base, TimeStamp):
    __tablename__ = TableNames.GUEST_LISTS.value

    host_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.HOSTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<GuestList {self.name}>"


class GuestListMember(Base):
    __tablename__ = TableNames.GUEST_LIST_MEMBERS.value

    guest_list_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.GUEST_LISTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utc_now,
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<GuestListMember {self.email}>"
