"""Pruning of snapshot contents and snapshot history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from boltwatch.snapshot import Snapshot, _now


@dataclass
class PruneOptions:
    """Pruning criteria.

    ``max_age`` drops older snapshots, ``max_count`` keeps at most that many
    (0 means unlimited), ``min_keys`` drops buckets with fewer keys.
    """

    max_age: timedelta = field(default_factory=lambda: timedelta(hours=24))
    max_count: int = 100
    min_keys: int = 0


def prune_snapshot(snap: Snapshot | None, opts: PruneOptions | None = None) -> Snapshot | None:
    """Return a new snapshot without buckets below ``opts.min_keys``."""
    if snap is None:
        return None
    opts = opts if opts is not None else PruneOptions()
    kept = [
        stats
        for stats in snap.buckets.values()
        if not (opts.min_keys > 0 and stats.keys < opts.min_keys)
    ]
    return Snapshot(kept, timestamp=snap.timestamp)


def prune_history(
    snapshots: list[Snapshot] | None, opts: PruneOptions | None = None
) -> list[Snapshot] | None:
    """Drop snapshots older than ``max_age`` and keep the newest ``max_count``.

    An empty or missing history is returned unchanged.
    """
    if not snapshots:
        return snapshots
    opts = opts if opts is not None else PruneOptions()
    cutoff = _now() - opts.max_age
    limit_age = opts.max_age > timedelta(0)
    filtered = [s for s in snapshots if not (limit_age and s.timestamp < cutoff)]
    if opts.max_count > 0 and len(filtered) > opts.max_count:
        filtered = filtered[-opts.max_count :]
    return filtered