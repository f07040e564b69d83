from enum import Enum


class TableNames(str, Enum):
    USERS = "users"
    WEDDING_SITES = "wedding_sites"
    EVENTS = "events"
    RSVPS = "rsvps"
