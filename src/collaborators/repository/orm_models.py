from uuid import UUID

from sqlalchemy import JSON, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from src.collaborators.dtos import CollaboratorRole, CollaboratorStatus
from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp


class EventCollaborator(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_COLLABORATORS.value

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(
        Enum(
            CollaboratorRole,
            name="collaborator_role_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=CollaboratorRole.COLLABORATOR,
        nullable=False,
    )
    # Recorded only; no route checks these yet
    permissions: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    invited_by: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.id", ondelete="CASCADE"),
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        Enum(
            CollaboratorStatus,
            name="collaborator_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=CollaboratorStatus.PENDING,
        nullable=False,
    )
