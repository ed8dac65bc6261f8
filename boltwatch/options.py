"""Settings that control a watcher."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import timedelta


@dataclass(frozen=True)
class WatchOptions:
    """Polling interval, verbosity and bucket filters of a watcher.

    Instances are immutable; the ``with_*`` methods return changed copies.
    """

    interval: timedelta = field(default_factory=lambda: timedelta(seconds=5))
    verbose: bool = False
    bucket_prefix: str = ""
    min_keys: int = 0

    def with_interval(self, interval: timedelta) -> WatchOptions:
        """Return a copy with a different polling interval."""
        return replace(self, interval=interval)

    def with_verbose(self, verbose: bool) -> WatchOptions:
        """Return a copy with verbose output switched on or off."""
        return replace(self, verbose=verbose)

    def with_bucket_prefix(self, prefix: str) -> WatchOptions:
        """Return a copy that watches only buckets starting with ``prefix``."""
        return replace(self, bucket_prefix=prefix)

    def with_min_keys(self, min_keys: int) -> WatchOptions:
        """Return a copy that skips buckets with fewer than ``min_keys`` keys."""
        return replace(self, min_keys=min_keys)