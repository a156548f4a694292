"""Domain entity for registered blog users."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """A registered reader or author.

    ``password_hash`` never leaves the application layer; response schemas
    do not declare it.
    """

    first_name: str
    last_name: str
    email: str
    password_hash: str
    avatar: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
