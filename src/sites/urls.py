OWN_SITE_URL = "/api/v1/wedding/site"
PUBLIC_SITE_URL = "/api/v1/wedding/{slug}"
PUBLIC_SITE_ACCESS_URL = "/api/v1/wedding/{slug}/access"
SUBMIT_RSVP_URL = "/api/v1/rsvp/{slug}"
LIST_RSVPS_URL = "/api/v1/rsvp/list"
EXPORT_RSVPS_URL = "/api/v1/rsvp/export"
