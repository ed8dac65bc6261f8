"""Aggregation of per-bucket statistics across many snapshots."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from boltwatch.snapshot import Snapshot, format_bytes


class RollupPeriod(str, Enum):
    """Time window a rollup covers."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RollupEntry:
    """Averages and maxima of one bucket over a period."""

    period_start: datetime
    period_end: datetime
    period: RollupPeriod
    avg_keys: float
    avg_size: float
    max_keys: int
    max_size: int
    sample_count: int


@dataclass
class _Accumulator:
    sum_keys: int = 0
    sum_size: int = 0
    max_keys: int = 0
    max_size: int = 0
    count: int = 0


def rollup_snapshots(
    snapshots: Iterable[Snapshot | None] | None, period: RollupPeriod
) -> dict[str, RollupEntry]:
    """Compute per-bucket averages and maxima over the given snapshots.

    Missing (None) snapshots are skipped.
    """
    accum: dict[str, _Accumulator] = {}
    earliest: datetime | None = None
    latest: datetime | None = None

    for snap in snapshots or ():
        if snap is None:
            continue
        ts = snap.timestamp
        if earliest is None or ts < earliest:
            earliest = ts
        if latest is None or ts > latest:
            latest = ts
        for name, stats in snap.buckets.items():
            acc = accum.setdefault(name, _Accumulator())
            acc.sum_keys += stats.keys
            acc.sum_size += stats.size
            acc.max_keys = max(acc.max_keys, stats.keys)
            acc.max_size = max(acc.max_size, stats.size)
            acc.count += 1

    if earliest is None or latest is None:
        return {}
    return {
        name: RollupEntry(
            period_start=earliest,
            period_end=latest,
            period=period,
            avg_keys=acc.sum_keys / acc.count,
            avg_size=acc.sum_size / acc.count,
            max_keys=acc.max_keys,
            max_size=acc.max_size,
            sample_count=acc.count,
        )
        for name, acc in accum.items()
        if acc.count
    }


def _truncate(name: str, limit: int) -> str:
    if len(name) <= limit:
        return name
    return name[: limit - 1] + "…"


def format_rollup(result: Mapping[str, RollupEntry] | None) -> str:
    """Render a rollup as a table."""
    if not result:
        return "No rollup data available."

    sample = next(iter(result.values()))
    rule = "-" * 70
    lines = [
        f"Rollup Period : {sample.period}",
        f"From          : {sample.period_start.strftime('%Y-%m-%d %H:%M:%S')}",
        f"To            : {sample.period_end.strftime('%Y-%m-%d %H:%M:%S')}",
        rule,
        f"{'Bucket':<24} {'AvgKeys':>10} {'MaxKeys':>10} {'AvgSize':>10} {'MaxSize':>10}",
        rule,
    ]
    for name, entry in result.items():
        lines.append(
            f"{_truncate(name, 24):<24} {entry.avg_keys:>10.1f} {entry.max_keys:>10d} "
            f"{format_bytes(int(entry.avg_size)):>10} {format_bytes(entry.max_size):>10}"
        )
    lines.append(rule)
    lines.append(f"Total buckets: {len(result)}")
    return "\n".join(lines) + "\n"