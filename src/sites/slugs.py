import re
import secrets
import string
import time

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_BASE36 = string.digits + string.ascii_lowercase

# path segments the wedding routes already use
RESERVED_SLUGS = frozenset({"site"})


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def slugify(value: str) -> str:
    """Lowercase and collapse every run of non-alphanumerics into one hyphen."""
    return _NON_ALNUM.sub("-", value.lower()).strip("-")


def generate_slug(name1: str, name2: str) -> str:
    return slugify(f"{name1}-and-{name2}")


def timestamp_token() -> str:
    return _to_base36(time.time_ns() // 1_000_000)


def generate_unique_slug(base_name: str) -> str:
    """Append a timestamp plus a random tail so the result is unique per process."""
    random_part = "".join(secrets.choice(_BASE36) for _ in range(5))
    return f"{base_name}-{timestamp_token()}{random_part}"


def default_slug(bride_name: str | None, groom_name: str | None) -> str:
    if bride_name and groom_name:
        slug = generate_slug(bride_name, groom_name)
        if slug:
            return slug
    return f"wedding-{timestamp_token()}"
