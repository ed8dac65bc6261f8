"""Direction of change of bucket statistics over a history of snapshots."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from boltwatch.snapshot import Snapshot


class TrendDirection(IntEnum):
    """Whether a metric is rising, falling or holding steady."""

    DOWN = -1
    STABLE = 0
    UP = 1

    def symbol(self) -> str:
        """Return an arrow that pictures the direction."""
        if self is TrendDirection.UP:
            return "↑"
        if self is TrendDirection.DOWN:
            return "↓"
        return "→"


@dataclass(frozen=True)
class BucketTrend:
    """Trend of one bucket's key count and size."""

    bucket: str
    keys_trend: TrendDirection = TrendDirection.STABLE
    size_trend: TrendDirection = TrendDirection.STABLE


def _direction(old: int, new: int) -> TrendDirection:
    if new > old:
        return TrendDirection.UP
    if new < old:
        return TrendDirection.DOWN
    return TrendDirection.STABLE


def compute_trends(history: Sequence[Snapshot] | None) -> list[BucketTrend]:
    """Compare the oldest and newest snapshots and report each bucket's trend.

    Buckets of the newest snapshot that the oldest lacks count as growing.
    Fewer than two snapshots give no trends.
    """
    if history is None or len(history) < 2:
        return []

    oldest = history[0].buckets
    newest = history[-1].buckets

    trends = []
    for name, new_stats in newest.items():
        old_stats = oldest.get(name)
        if old_stats is None:
            trends.append(BucketTrend(name, TrendDirection.UP, TrendDirection.UP))
        else:
            trends.append(
                BucketTrend(
                    name,
                    _direction(old_stats.keys, new_stats.keys),
                    _direction(old_stats.size, new_stats.size),
                )
            )
    return trends