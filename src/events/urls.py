EVENTS_URL = "/api/events"
EVENT_URL = "/api/events/{event_id}"
CANCEL_EVENT_URL = "/api/events/{event_id}/cancel"
EVENT_MESSAGES_URL = "/api/events/{event_id}/messages"
