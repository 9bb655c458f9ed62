from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, Enum, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.announcements.dtos import TargetAudience
from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp, UTCDateTime


class Announcement(Base, TimeStamp):
    __tablename__ = TableNames.ANNOUNCEMENTS.value

    host_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.HOSTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    target_audience: Mapped[str] = mapped_column(
        Enum(
            TargetAudience,
            name="target_audience_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=TargetAudience.ALL_USERS,
        nullable=False,
    )
    event_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.id", ondelete="SET NULL"),
        nullable=True,
    )
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    published_at: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)

    def __repr__(self) -> str:
        return f"<Announcement {self.title}>"
