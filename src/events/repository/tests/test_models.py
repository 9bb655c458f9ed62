"""Tests for the SQL event read and write models."""

from datetime import UTC, datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.accounts.repository.read_models import SqlAccountReadModel
from src.accounts.repository.write_models import SqlAccountWriteModel
from src.config.database import async_session_maker
from src.events.dtos import EventCreateDTO, EventStatus, GuestSender, HostSender, SenderType
from src.events.repository.orm_models import EventMessage
from src.events.repository.read_models import SqlEventReadModel
from src.events.repository.write_models import SqlEventWriteModel
from src.invitations.dtos import GuestDTO, RSVPStatus
from src.invitations.repository.orm_models import Invitation
from src.invitations.repository.write_models import SqlInvitationWriteModel


async def _host(db_session, email="host@example.com"):
    user = await SqlAccountWriteModel(session_overwrite=db_session).create_user(email, "hash")
    return await SqlAccountReadModel(session_overwrite=db_session).get_host_by_user_id(user.id)


def _event_data(title="Dinner", start=datetime(2030, 1, 1, 19, tzinfo=UTC)) -> EventCreateDTO:
    return EventCreateDTO(title=title, start_date_time=start)


async def test_create_event_defaults():
    async with async_session_maker() as db_session:
        host = await _host(db_session)

        event = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            host.id, _event_data()
        )

        await db_session.rollback()
        assert event.host_id == host.id
        assert event.status == EventStatus.UPCOMING
        assert event.is_all_day is False
        assert event.start_date_time == datetime(2030, 1, 1, 19, tzinfo=UTC)


async def test_update_event_ignores_unknown_fields():
    async with async_session_maker() as db_session:
        host = await _host(db_session)
        write_model = SqlEventWriteModel(session_overwrite=db_session)
        event = await write_model.create_event(host.id, _event_data())

        updated = await write_model.update_event(
            event.id, {"location": "Home", "host_id": None}
        )

        await db_session.rollback()
        assert updated.location == "Home"
        assert updated.host_id == host.id


async def test_list_host_events_counts_rsvps_and_messages():
    async with async_session_maker() as db_session:
        host = await _host(db_session)
        write_model = SqlEventWriteModel(session_overwrite=db_session)
        invitation_write_model = SqlInvitationWriteModel(session_overwrite=db_session)
        event = await write_model.create_event(host.id, _event_data())
        invitations = await invitation_write_model.create_invitations(
            event.id, [GuestDTO(email="a@example.com"), GuestDTO(email="b@example.com")]
        )
        await invitation_write_model.update_rsvp(invitations[0].token, RSVPStatus.MAYBE)
        await write_model.post_message(event.id, HostSender(host_id=host.id), "hi")
        await write_model.post_message(
            event.id, GuestSender(invitation_id=invitations[1].id), "hello"
        )

        summaries = await SqlEventReadModel(session_overwrite=db_session).list_host_events(host.id)

        await db_session.rollback()
        assert len(summaries) == 1
        assert summaries[0].rsvp_counts.total == 2
        assert summaries[0].rsvp_counts.maybe == 1
        assert summaries[0].rsvp_counts.pending == 1
        assert summaries[0].message_count == 2


async def test_post_message_records_the_sender():
    async with async_session_maker() as db_session:
        host = await _host(db_session)
        write_model = SqlEventWriteModel(session_overwrite=db_session)
        event = await write_model.create_event(host.id, _event_data())

        message = await write_model.post_message(event.id, HostSender(host_id=host.id), "hi")

        await db_session.rollback()
        assert message.sender == HostSender(host_id=host.id)
        assert message.sender.sender_type == SenderType.HOST


async def test_message_sender_must_match_its_type():
    async with async_session_maker() as db_session:
        host = await _host(db_session)
        event = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            host.id, _event_data()
        )
        db_session.add(
            EventMessage(
                event_id=event.id,
                sender_type=SenderType.GUEST,
                host_id=host.id,
                message="spoofed",
            )
        )

        with pytest.raises(IntegrityError):
            await db_session.flush()
        await db_session.rollback()


async def test_delete_event_cascades_to_invitations():
    async with async_session_maker() as db_session:
        host = await _host(db_session)
        write_model = SqlEventWriteModel(session_overwrite=db_session)
        event = await write_model.create_event(host.id, _event_data())
        await SqlInvitationWriteModel(session_overwrite=db_session).create_invitation(
            event.id, email="a@example.com"
        )

        deleted = await write_model.delete_event(event.id)
        remaining = await db_session.execute(
            select(Invitation).where(Invitation.event_id == event.id)
        )

        await db_session.rollback()
        assert deleted is True
        assert remaining.scalars().all() == []
