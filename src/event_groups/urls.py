EVENT_GROUPS_URL = "/api/event-groups"
EVENT_GROUP_URL = "/api/event-groups/{group_id}"
EVENT_GROUP_GUEST_LISTS_URL = "/api/event-groups/{group_id}/guest-lists"
EVENT_GROUP_GUEST_LIST_URL = "/api/event-groups/{group_id}/guest-lists/{guest_list_id}"
