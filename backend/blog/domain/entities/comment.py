"""Domain entity for reader comments."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Comment:
    """A comment left under an article."""

    article_id: int
    text: str
    id: int | None = None
    user_id: int | None = None
    created_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
