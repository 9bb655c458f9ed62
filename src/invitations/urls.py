EVENT_INVITATIONS_URL = "/api/events/{event_id}/invitations"
ADD_INVITATIONS_URL = "/api/events/{event_id}/add-invitations"
RESEND_INVITATIONS_URL = "/api/events/{event_id}/resend-invitations"
RESEND_INVITATION_URL = "/api/invitations/{invitation_id}/resend"

EVENT_GUEST_URL = "/api/events/{event_id}/guests/{invitation_id}"
SUSPEND_GUEST_URL = "/api/events/{event_id}/guests/{invitation_id}/suspend"
BLOCK_GUEST_URL = "/api/events/{event_id}/guests/{invitation_id}/block"

INVITATION_URL = "/api/invitations/{token}"
INVITATION_RSVP_URL = "/api/invitations/{token}/rsvp"
EMAIL_RSVP_URL = "/api/rsvp/{token}/{response}"
