from datetime import datetime
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy import JSON, Boolean, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp, UTCDateTime, utc_now
from src.polls.dtos import PollStatus


class Poll(Base, TimeStamp):
    __tablename__ = TableNames.POLLS.value

    host_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.HOSTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    options: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    allow_multiple_choices: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    end_date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    status: Mapped[str] = mapped_column(
        Enum(
            PollStatus,
            name="poll_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=PollStatus.ACTIVE,
        nullable=False,
    )
    converted_event_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Poll {self.title} ({self.status})>"


class PollVote(Base):
    """One ballot per (poll, user) or (poll, voter_email); revoting overwrites it."""

    __tablename__ = TableNames.POLL_VOTES.value

    poll_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.POLLS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.id", ondelete="SET NULL"),
        nullable=True,
    )
    voter_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    voter_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    selected_options: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utc_now,
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )
