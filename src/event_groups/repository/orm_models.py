from datetime import datetime
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy import ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp, UTCDateTime, utc_now


class EventGroup(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_GROUPS.value

    host_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.HOSTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<EventGroup {self.title}>"


class EventGroupGuestList(Base):
    __tablename__ = TableNames.EVENT_GROUP_GUEST_LISTS.value
    __table_args__ = (
        UniqueConstraint("event_group_id", "guest_list_id", name="uq_event_group_guest_list"),
    )

    event_group_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENT_GROUPS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    guest_list_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.GUEST_LISTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utc_now,
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )
