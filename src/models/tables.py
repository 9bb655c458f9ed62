"""Importing this module registers every table on ``BaseModel.metadata``."""

from src.accounts.repository.orm_models import Host, User
from src.announcements.repository.orm_models import Announcement
from src.collaborators.repository.orm_models import EventCollaborator
from src.event_groups.repository.orm_models import EventGroup, EventGroupGuestList
from src.events.repository.orm_models import Event, EventMessage
from src.guest_lists.repository.orm_models import GuestList, GuestListMember
from src.invitations.repository.orm_models import Invitation
from src.models.base import BaseModel
from src.polls.repository.orm_models import Poll, PollVote

__all__ = [
    "BaseModel",
    "User",
    "Host",
    "Event",
    "EventMessage",
    "EventGroup",
    "EventGroupGuestList",
    "Invitation",
    "GuestList",
    "GuestListMember",
    "EventCollaborator",
    "Announcement",
    "Poll",
    "PollVote",
]
