# domain/model/pagination.py

import math
from dataclasses import dataclass

DEFAULT_SIZE = 10
FIRST_PAGE = 1

# Largest page or size accepted from callers; skip and limit are sent as BSON int64
MAX_PAGE_VALUE = 2**63 - 1


@dataclass(frozen=True)
class PaginationOptions:
    """Requested page and page size, as received from the caller."""
    page: int = FIRST_PAGE
    size: int = DEFAULT_SIZE

    def normalized(self) -> 'PaginationOptions':
        """Replace non-positive page/size with their defaults."""
        page = self.page if self.page > 0 else FIRST_PAGE
        size = self.size if self.size > 0 else DEFAULT_SIZE
        return PaginationOptions(page=page, size=size)

    @property
    def skip(self) -> int:
        opts = self.normalized()
        return (opts.page - 1) * opts.size

    @property
    def limit(self) -> int:
        return self.normalized().size


@dataclass(frozen=True)
class Paginated:
    """Page descriptor for one slice of a larger result set."""
    total_count: int
    total_pages: int
    current_page: int
    size: int
    has_more: bool


def paginate(total_count: int, opts: PaginationOptions) -> Paginated:
    """Build the page descriptor for ``total_count`` matching documents.

    The page count is the ceiling of ``total_count / size``; ``has_more`` only
    compares the requested page against it, so a page past the end yields
    ``has_more=False`` with the same envelope shape.

    Example:
        paginate(10, PaginationOptions(page=1, size=2)) → 5 pages, has_more=True
        paginate(10, PaginationOptions(page=6, size=2)) → 5 pages, has_more=False
    """
    opts = opts.normalized()
    total_pages = int(math.ceil(total_count / opts.size))
    return Paginated(
        total_count=total_count,
        total_pages=total_pages,
        current_page=opts.page,
        size=opts.size,
        has_more=opts.page < total_pages,
    )
