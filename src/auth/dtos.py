from dataclasses import dataclass
from uuid import UUID


class EmailAlreadyRegisteredError(Exception):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User with email '{email}' already exists")


@dataclass(frozen=True)
class SessionDTO:
    """Identity carried by a session token."""

    user_id: UUID
    email: str
