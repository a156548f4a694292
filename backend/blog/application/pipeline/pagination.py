"""Page arithmetic for article listings."""

import math

ARTICLES_PER_PAGE = 8

# Largest OFFSET a 64-bit database integer can bind
MAX_OFFSET = 2**63 - 1


class PaginationGate:
    """Computes page counts and rejects pages past the end of a listing.

    An empty listing has zero pages but page 1 is still valid: it is
    "page 1 of nothing". No lower bound is enforced here.
    """

    def __init__(self, page_size: int = ARTICLES_PER_PAGE):
        self.page_size = page_size

    @staticmethod
    def page_count(total_items: int, page_size: int = ARTICLES_PER_PAGE) -> int:
        return math.ceil(total_items / page_size)

    @staticmethod
    def is_page_in_range(requested_page: int, page_count: int) -> bool:
        return requested_page <= max(page_count, 1)

    def offset(self, requested_page: int) -> int:
        """Row offset of the first item on ``requested_page``."""
        return (max(requested_page, 1) - 1) * self.page_size

    def is_addressable(self, requested_page: int) -> bool:
        """False when the page's offset cannot be sent to the store at all."""
        return self.offset(requested_page) <= MAX_OFFSET

    def pages_for(self, total_items: int) -> int:
        return self.page_count(total_items, self.page_size)
