import re
from datetime import date, datetime

from src.sites.dtos import SiteValidationError

HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")
MAX_GALLERY_IMAGES = 10


def parse_date(value: date | datetime | str | None, field_name: str) -> date | None:
    """Turn an ISO-8601 date or datetime (string or value) into a date.

    ``None`` and blank strings mean "no date". Anything unparseable raises
    SiteValidationError instead of falling back to a default.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise SiteValidationError(field_name, f"expected a date, got {type(value).__name__}")

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise SiteValidationError(field_name, f"invalid date '{value}'") from None


def require_date(value: date | datetime | str | None, field_name: str) -> date:
    parsed = parse_date(value, field_name)
    if parsed is None:
        raise SiteValidationError(field_name, "date is required")
    return parsed


def validate_color(value: str, field_name: str) -> str:
    if not HEX_COLOR.match(value or ""):
        raise SiteValidationError(field_name, "invalid color format, expected #RRGGBB")
    return value


def validate_gallery(images: list[str]) -> list[str]:
    if len(images) > MAX_GALLERY_IMAGES:
        raise SiteValidationError(
            "gallery_images", f"maximum {MAX_GALLERY_IMAGES} images allowed"
        )
    return list(images)


def require_text(value: str | None, field_name: str) -> str:
    text = (value or "").strip()
    if not text:
        raise SiteValidationError(field_name, "must not be empty")
    return text
