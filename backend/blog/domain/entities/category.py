from dataclasses import dataclass


@dataclass
class Category:
    """Article category (a tag shown in the blog navigation)."""

    name: str
    id: int | None = None
