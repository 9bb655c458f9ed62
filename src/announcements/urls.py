ANNOUNCEMENTS_URL = "/api/announcements"
ANNOUNCEMENT_URL = "/api/announcements/{announcement_id}"
PUBLISH_ANNOUNCEMENT_URL = "/api/announcements/{announcement_id}/publish"
