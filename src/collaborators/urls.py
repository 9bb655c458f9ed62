EVENT_COLLABORATORS_URL = "/api/events/{event_id}/collaborators"
EVENT_COLLABORATOR_URL = "/api/events/{event_id}/collaborators/{collaborator_id}"
COLLABORATED_EVENTS_URL = "/api/collaborated-events"
