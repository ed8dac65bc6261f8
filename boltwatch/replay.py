"""Chronological replay of recorded snapshots."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from boltwatch.snapshot import Snapshot, format_bytes


@dataclass
class ReplayOptions:
    """Replay window and spacing.

    ``start`` and ``end`` bound the timestamps (None means unbounded);
    ``step`` is the minimum gap between replayed snapshots (zero keeps all).
    """

    start: datetime | None = None
    end: datetime | None = None
    step: timedelta = field(default_factory=timedelta)


@dataclass
class ReplayResult:
    """Snapshots selected for replay, oldest first, with their time span."""

    snapshots: list[Snapshot] = field(default_factory=list)
    start: datetime | None = None
    end: datetime | None = None


def replay_history(
    history: Iterable[Snapshot] | None, opts: ReplayOptions | None = None
) -> ReplayResult:
    """Select snapshots from a history in chronological order.

    Raises ValueError when no history is given.
    """
    if history is None:
        raise ValueError("replay: no history")
    opts = opts if opts is not None else ReplayOptions()

    selected: list[Snapshot] = []
    last_kept: datetime | None = None
    for snap in sorted(history, key=lambda s: s.timestamp):
        ts = snap.timestamp
        if opts.start is not None and ts < opts.start:
            continue
        if opts.end is not None and ts > opts.end:
            continue
        if opts.step > timedelta(0) and last_kept is not None and ts - last_kept < opts.step:
            continue
        selected.append(snap)
        last_kept = ts

    if not selected:
        return ReplayResult()
    return ReplayResult(selected, selected[0].timestamp, selected[-1].timestamp)


def _clock_ms(ts: datetime) -> str:
    return ts.strftime("%H:%M:%S.") + f"{ts.microsecond // 1000:03d}"


def format_replay(result: ReplayResult | None) -> str:
    """Return a per-snapshot summary of a replay."""
    if result is None or not result.snapshots:
        return "replay: no snapshots to display\n"

    start = result.start or result.snapshots[0].timestamp
    end = result.end or result.snapshots[-1].timestamp
    lines = [
        f"Replay: {len(result.snapshots)} snapshot(s) from "
        f"{start.strftime('%H:%M:%S')} to {end.strftime('%H:%M:%S')}",
        "-" * 60,
    ]
    for index, snap in enumerate(result.snapshots, start=1):
        lines.append(
            f"[{index:3d}] {_clock_ms(snap.timestamp)}  "
            f"buckets={len(snap.buckets):<4d} keys={snap.total_keys():<8d} "
            f"size={format_bytes(snap.total_size())}"
        )
    lines.append("-" * 60)
    return "\n".join(lines) + "\n"