"""initial_schema

Revision ID: 4f1c2a9e7b30
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision = "4f1c2a9e7b30"
down_revision = None
branch_labels = None
depends_on = None


def _uuid() -> sqlalchemy_utils.UUIDType:
    return sqlalchemy_utils.UUIDType(binary=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    ]


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        _created_at(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "hosts",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "user_id",
            _uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("preferred_name", sa.String(length=255), nullable=True),
        sa.Column("contact", sa.String(length=255), nullable=True),
        sa.Column("picture_url", sa.Text(), nullable=True),
        sa.Column("facebook_url", sa.Text(), nullable=True),
        sa.Column("instagram_url", sa.Text(), nullable=True),
        sa.Column("twitter_url", sa.Text(), nullable=True),
        sa.Column("linkedin_url", sa.Text(), nullable=True),
        sa.Column("website_url", sa.Text(), nullable=True),
        sa.Column("personal_statement", sa.Text(), nullable=True),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        "event_groups",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "host_id", _uuid(), sa.ForeignKey("hosts.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_event_groups_host_id", "event_groups", ["host_id"])

    op.create_table(
        "events",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "host_id", _uuid(), sa.ForeignKey("hosts.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_all_day", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("exact_address", sa.Text(), nullable=True),
        sa.Column("custom_directions", sa.Text(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("upcoming", "cancelled", "past", name="event_status_enum"),
            nullable=False,
            server_default="upcoming",
        ),
        sa.Column(
            "group_id",
            _uuid(),
            sa.ForeignKey("event_groups.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_events_host_id", "events", ["host_id"])
    op.create_index("ix_events_group_id", "events", ["group_id"])

    op.create_table(
        "invitations",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "event_id", _uuid(), sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("token", sa.String(length=64), nullable=False, unique=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column(
            "rsvp_status",
            sa.Enum("pending", "yes", "no", "maybe", name="rsvp_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("is_blocked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_suspended", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("message_blocked", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_invitations_event_id", "invitations", ["event_id"])
    op.create_index("ix_invitations_email", "invitations", ["email"])

    op.create_table(
        "event_messages",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "event_id", _uuid(), sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column(
            "sender_type", sa.Enum("host", "guest", name="sender_type_enum"), nullable=False
        ),
        sa.Column(
            "host_id", _uuid(), sa.ForeignKey("hosts.id", ondelete="CASCADE"), nullable=True
        ),
        sa.Column(
            "invitation_id",
            _uuid(),
            sa.ForeignKey("invitations.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("message", sa.Text(), nullable=False),
        _created_at(),
        sa.CheckConstraint(
            "(sender_type = 'host' AND host_id IS NOT NULL AND invitation_id IS NULL)"
            " OR (sender_type = 'guest' AND invitation_id IS NOT NULL AND host_id IS NULL)",
            name="ck_event_messages_sender",
        ),
    )
    op.create_index("ix_event_messages_event_id", "event_messages", ["event_id"])
    op.create_index("ix_event_messages_created_at", "event_messages", ["created_at"])

    op.create_table(
        "guest_lists",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "host_id", _uuid(), sa.ForeignKey("hosts.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_guest_lists_host_id", "guest_lists", ["host_id"])

    op.create_table(
        "guest_list_members",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "guest_list_id",
            _uuid(),
            sa.ForeignKey("guest_lists.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        _created_at(),
    )
    op.create_index("ix_guest_list_members_guest_list_id", "guest_list_members", ["guest_list_id"])

    op.create_table(
        "event_group_guest_lists",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "event_group_id",
            _uuid(),
            sa.ForeignKey("event_groups.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "guest_list_id",
            _uuid(),
            sa.ForeignKey("guest_lists.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _created_at(),
        sa.UniqueConstraint("event_group_id", "guest_list_id", name="uq_event_group_guest_list"),
    )
    op.create_index(
        "ix_event_group_guest_lists_event_group_id", "event_group_guest_lists", ["event_group_id"]
    )
    op.create_index(
        "ix_event_group_guest_lists_guest_list_id", "event_group_guest_lists", ["guest_list_id"]
    )

    op.create_table(
        "event_collaborators",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "event_id", _uuid(), sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column(
            "user_id", _uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column(
            "role",
            sa.Enum("co-host", "organizer", "collaborator", name="collaborator_role_enum"),
            nullable=False,
            server_default="collaborator",
        ),
        sa.Column("permissions", sa.JSON(), nullable=False),
        sa.Column(
            "invited_by", _uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column(
            "status",
            sa.Enum("pending", "accepted", "declined", name="collaborator_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        *_timestamps(),
    )
    op.create_index("ix_event_collaborators_event_id", "event_collaborators", ["event_id"])
    op.create_index("ix_event_collaborators_user_id", "event_collaborators", ["user_id"])

    op.create_table(
        "announcements",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "host_id", _uuid(), sa.ForeignKey("hosts.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "target_audience",
            sa.Enum(
                "all_users", "event_attendees", "specific_users", name="target_audience_enum"
            ),
            nullable=False,
            server_default="all_users",
        ),
        sa.Column(
            "event_id", _uuid(), sa.ForeignKey("events.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_announcements_host_id", "announcements", ["host_id"])

    op.create_table(
        "polls",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "host_id", _uuid(), sa.ForeignKey("hosts.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("options", sa.JSON(), nullable=False),
        sa.Column(
            "allow_multiple_choices", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "status",
            sa.Enum("active", "ended", "converted", name="poll_status_enum"),
            nullable=False,
            server_default="active",
        ),
        sa.Column(
            "converted_event_id",
            _uuid(),
            sa.ForeignKey("events.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_polls_host_id", "polls", ["host_id"])

    op.create_table(
        "poll_votes",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "poll_id", _uuid(), sa.ForeignKey("polls.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column(
            "user_id", _uuid(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("voter_email", sa.String(length=255), nullable=True),
        sa.Column("voter_name", sa.Text(), nullable=True),
        sa.Column("selected_options", sa.JSON(), nullable=False),
        _created_at(),
    )
    op.create_index("ix_poll_votes_poll_id", "poll_votes", ["poll_id"])


def downgrade() -> None:
    op.drop_table("poll_votes")
    op.drop_table("polls")
    op.drop_table("announcements")
    op.drop_table("event_collaborators")
    op.drop_table("event_group_guest_lists")
    op.drop_table("guest_list_members")
    op.drop_table("guest_lists")
    op.drop_table("event_messages")
    op.drop_table("invitations")
    op.drop_table("events")
    op.drop_table("event_groups")
    op.drop_table("hosts")
    op.drop_table("users")

    for enum_name in (
        "poll_status_enum",
        "target_audience_enum",
        "collaborator_status_enum",
        "collaborator_role_enum",
        "sender_type_enum",
        "rsvp_status_enum",
        "event_status_enum",
    ):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
