"""Reduction of a snapshot to its most significant buckets."""

from __future__ import annotations

from dataclasses import dataclass

from boltwatch.snapshot import Snapshot, format_bytes


@dataclass
class ReduceConfig:
    """How many buckets to keep and how to order them first.

    ``max_buckets`` 0 means no limit; key sorting wins over size sorting.
    """

    max_buckets: int = 20
    sort_by_keys: bool = True
    sort_by_size: bool = False


def reduce_snapshot(snap: Snapshot | None, cfg: ReduceConfig | None = None) -> Snapshot | None:
    """Return a new snapshot with at most ``cfg.max_buckets`` buckets.

    A missing or empty snapshot is returned as it is.
    """
    if snap is None or snap.is_empty():
        return snap
    cfg = cfg if cfg is not None else ReduceConfig()

    buckets = list(snap.buckets.values())
    if cfg.sort_by_keys:
        buckets.sort(key=lambda b: b.keys, reverse=True)
    elif cfg.sort_by_size:
        buckets.sort(key=lambda b: b.size, reverse=True)

    if cfg.max_buckets > 0:
        buckets = buckets[: cfg.max_buckets]
    return Snapshot(buckets, timestamp=snap.timestamp)


def format_reduced(snap: Snapshot | None, original_count: int) -> str:
    """Return a table of a reduced snapshot, noting how many buckets are shown."""
    if snap is None:
        return "(no snapshot)"

    shown = len(snap.buckets)
    if original_count > shown:
        lines = [f"Showing top {shown} of {original_count} buckets (reduced)"]
    else:
        lines = [f"Showing all {shown} buckets"]

    if shown == 0:
        lines.append("  (empty)")
        return "\n".join(lines) + "\n"

    lines.append(f"{'Bucket':<30} {'Keys':>10} {'Size':>12}")
    lines.append("-" * 56)
    lines.extend(
        f"{b.name:<30} {b.keys:>10d} {format_bytes(b.size):>12}" for b in snap.buckets.values()
    )
    return "\n".join(lines) + "\n"