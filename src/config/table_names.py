from enum import Enum


class TableNames(str, Enum):
    USERS = "users"
    HOSTS = "hosts"
    EVENTS = "events"
    EVENT_GROUPS = "event_groups"
    INVITATIONS = "invitations"
    EVENT_MESSAGES = "event_messages"
    GUEST_LISTS = "guest_lists"
    GUEST_LIST_MEMBERS = "guest_list_members"
    EVENT_GROUP_GUEST_LISTS = "event_group_guest_lists"
    EVENT_COLLABORATORS = "event_collaborators"
    ANNOUNCEMENTS = "announcements"
    POLLS = "polls"
    POLL_VOTES = "poll_votes"
