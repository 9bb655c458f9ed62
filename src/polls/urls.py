POLLS_URL = "/api/polls"
POLL_URL = "/api/polls/{poll_id}"
END_POLL_URL = "/api/polls/{poll_id}/end"
POLL_VOTE_URL = "/api/polls/{poll_id}/vote"
POLL_EMAIL_VOTE_URL = "/api/polls/{poll_id}/vote-email"
CONVERT_POLL_URL = "/api/polls/{poll_id}/convert-to-event"

# Frontend page for a poll, used by emails and redirects
POLL_PAGE_PATH = "/polls/{poll_id}"
