GUEST_LISTS_URL = "/api/guest-lists"
GUEST_LIST_URL = "/api/guest-lists/{guest_list_id}"
GUEST_LIST_MEMBERS_URL = "/api/guest-lists/{guest_list_id}/members"
GUEST_LIST_MEMBER_URL = "/api/guest-lists/{guest_list_id}/members/{member_id}"
INVITE_TO_EVENT_URL = "/api/guest-lists/{guest_list_id}/invite-to-event"
