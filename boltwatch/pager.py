"""Pagination over the buckets of a snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field

from boltwatch.snapshot import BucketStats, Snapshot


@dataclass
class Page:
    """A single page of bucket stats."""

    items: list[BucketStats] = field(default_factory=list)
    page: int = 0
    page_size: int = 0
    total: int = 0

    def total_pages(self) -> int:
        """Return the number of pages needed to show every item."""
        if self.page_size <= 0 or self.total == 0:
            return 0
        return -(-self.total // self.page_size)

    def has_next(self) -> bool:
        """Report whether a following page exists."""
        return self.page < self.total_pages()

    def has_prev(self) -> bool:
        """Report whether a previous page exists."""
        return self.page > 1


@dataclass
class PageOptions:
    """Pagination settings; ``page`` is 1-based."""

    page: int = 1
    page_size: int = 10


def paginate_snapshot(snap: Snapshot | None, opts: PageOptions | None = None) -> Page:
    """Return one page of bucket stats from the snapshot.

    A missing snapshot or a non-positive page size gives an empty Page.
    """
    opts = opts if opts is not None else PageOptions()
    if snap is None or opts.page_size <= 0:
        return Page()
    page = max(opts.page, 1)
    buckets = list(snap.buckets.values())
    start = (page - 1) * opts.page_size
    return Page(
        items=buckets[start : start + opts.page_size],
        page=page,
        page_size=opts.page_size,
        total=len(buckets),
    )