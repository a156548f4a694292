"""Domain entities: pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .category import Category
from .comment import Comment


@dataclass
class Article:
    """Core domain entity representing a published blog article.

    ``comments`` is ``None`` when the collaborator did not load the
    collection, and an (possibly empty) list when it did.
    """

    title: str
    announce: str
    full_text: str = ""
    picture: str | None = None
    id: int | None = None
    author_id: int | None = None
    categories: list[Category] = field(default_factory=list)
    comments: list[Comment] | None = None
    comments_count: int = 0
    created_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        title: str | None = None,
        announce: str | None = None,
        full_text: str | None = None,
        picture: str | None = None,
        created_date: datetime | None = None,
        categories: list[Category] | None = None,
    ) -> None:
        """Apply the non-empty fields of an edit form."""
        if title is not None:
            self.title = title
        if announce is not None:
            self.announce = announce
        if full_text is not None:
            self.full_text = full_text
        if picture is not None:
            self.picture = picture
        if created_date is not None:
            self.created_date = created_date
        if categories is not None:
            self.categories = categories
