"""CSV rendering of a site's RSVPs for download from the admin panel."""

import csv
import io
from collections.abc import Iterable

from src.sites.dtos import RSVPDTO

CSV_HEADER = (
    "Full Name",
    "Email",
    "Attending",
    "Dietary Restrictions",
    "Message",
    "Submitted At",
)


def rsvps_to_csv(rsvps: Iterable[RSVPDTO]) -> str:
    """Render RSVPs as CSV text.

    The header line is plain; every data field is quoted with embedded quotes doubled.
    Lines are separated by ``\\n`` and there is no trailing newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for rsvp in rsvps:
        writer.writerow(
            [
                rsvp.full_name,
                rsvp.email or "",
                "Yes" if rsvp.attending else "No",
                rsvp.dietary_restrictions or "",
                rsvp.message or "",
                rsvp.created_at.isoformat(),
            ]
        )

    rows = buffer.getvalue().rstrip("\n")
    header = ",".join(CSV_HEADER)
    return f"{header}\n{rows}" if rows else header


def export_filename(slug: str | None) -> str:
    return f"rsvps-{slug or 'wedding'}.csv"
