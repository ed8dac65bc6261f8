"""Point-in-time views of bucket statistics."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime

_UNITS = ("KB", "MB", "GB", "TB", "PB")


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class BucketStats:
    """Key count and byte size of a single bucket."""

    name: str = ""
    keys: int = 0
    size: int = 0


class Snapshot:
    """Bucket statistics captured at one moment, keyed by bucket name.

    Buckets keep the order in which they were given.
    """

    def __init__(
        self,
        buckets: Mapping[str, BucketStats] | Iterable[BucketStats] | None = None,
        timestamp: datetime | None = None,
    ) -> None:
        self.timestamp = timestamp if timestamp is not None else _now()
        self.buckets: dict[str, BucketStats] = {}
        if buckets is None:
            return
        if isinstance(buckets, Mapping):
            for name, stats in buckets.items():
                self.buckets[name] = stats if stats.name == name else replace(stats, name=name)
        else:
            for stats in buckets:
                self.buckets[stats.name] = stats

    def __repr__(self) -> str:
        return f"Snapshot(timestamp={self.timestamp!r}, buckets={list(self.buckets.values())!r})"

    def is_empty(self) -> bool:
        """Return True when the snapshot holds no buckets."""
        return not self.buckets

    def total_keys(self) -> int:
        """Return the sum of keys across all buckets."""
        return sum(b.keys for b in self.buckets.values())

    def total_size(self) -> int:
        """Return the sum of sizes in bytes across all buckets."""
        return sum(b.size for b in self.buckets.values())

    def get(self, name: str) -> BucketStats | None:
        """Return the stats of the named bucket, or None if absent."""
        return self.buckets.get(name)

    def bucket_names(self) -> list[str]:
        """Return bucket names in snapshot order."""
        return list(self.buckets)


def format_bytes(size: int | float) -> str:
    """Render a byte count with a binary unit suffix."""
    size = int(size)
    if size < 0:
        return "-" + format_bytes(-size)
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in _UNITS:
        value /= 1024
        if value < 1024 or unit == _UNITS[-1]:
            return f"{value:.1f} {unit}"
    raise AssertionError("unreachable")