from datetime import datetime
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy import Boolean, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.events.dtos import EventStatus, SenderType
from src.models.base import Base, TimeStamp, UTCDateTime, utc_now


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    host_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.HOSTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    end_date_time: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)
    is_all_day: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    exact_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    custom_directions: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        Enum(
            EventStatus,
            name="event_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=EventStatus.UPCOMING,
        nullable=False,
    )
    group_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.EVENT_GROUPS.value}.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Event {self.title}>"


class EventMessage(Base):
    """Chat message; exactly one of host_id / invitation_id is set, per sender_type."""

    __tablename__ = TableNames.EVENT_MESSAGES.value
    __table_args__ = (
        sa.CheckConstraint(
            "(sender_type = 'host' AND host_id IS NOT NULL AND invitation_id IS NULL)"
            " OR (sender_type = 'guest' AND invitation_id IS NOT NULL AND host_id IS NULL)",
            name="ck_event_messages_sender",
        ),
    )

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sender_type: Mapped[str] = mapped_column(
        Enum(
            SenderType,
            name="sender_type_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )
    host_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.HOSTS.value}.id", ondelete="CASCADE"),
        nullable=True,
    )
    invitation_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.INVITATIONS.value}.id", ondelete="CASCADE"),
        nullable=True,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utc_now,
        server_default=sa.func.current_timestamp(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<EventMessage {self.sender_type} on event {self.event_id}>"
