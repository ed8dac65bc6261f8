"""Named pinned snapshots and comparisons against them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from boltwatch.snapshot import Snapshot, _now


@dataclass
class PinnedSnapshot:
    """A snapshot kept under a label for later comparison."""

    label: str
    pinned_at: datetime
    snapshot: Snapshot


class PinBoard:
    """A collection of pinned snapshots keyed by label."""

    def __init__(self) -> None:
        self._pins: dict[str, PinnedSnapshot] = {}

    def pin(self, label: str, snapshot: Snapshot | None) -> None:
        """Store a snapshot under a label, replacing any existing pin."""
        if snapshot is None:
            return
        self._pins[label] = PinnedSnapshot(label=label, pinned_at=_now(), snapshot=snapshot)

    def get(self, label: str) -> PinnedSnapshot | None:
        """Return the pin for a label, or None if there is none."""
        return self._pins.get(label)

    def remove(self, label: str) -> None:
        """Delete the pin for a label, if present."""
        self._pins.pop(label, None)

    def labels(self) -> list[str]:
        """Return all pin labels."""
        return list(self._pins)

    def __len__(self) -> int:
        return len(self._pins)


@dataclass
class PinComparison:
    """How a live snapshot differs from a pinned one."""

    label: str
    new_buckets: list[str] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)
    grown: list[str] = field(default_factory=list)
    shrunk: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)

    def has_changes(self) -> bool:
        """Report whether any bucket grew, shrank, appeared or disappeared."""
        return bool(self.grown or self.shrunk or self.new_buckets or self.dropped)


def compare_to_pinned(
    board: PinBoard | None, label: str, live: Snapshot | None
) -> PinComparison | None:
    """Compare a live snapshot to the labelled pin; None if either is missing."""
    if board is None or live is None:
        return None
    pin = board.get(label)
    if pin is None:
        return None

    pinned = pin.snapshot.buckets
    cmp = PinComparison(label=label)
    for name, live_stat in live.buckets.items():
        pin_stat = pinned.get(name)
        if pin_stat is None:
            cmp.new_buckets.append(name)
        elif live_stat.keys > pin_stat.keys:
            cmp.grown.append(name)
        elif live_stat.keys < pin_stat.keys:
            cmp.shrunk.append(name)
        else:
            cmp.unchanged.append(name)
    cmp.dropped.extend(name for name in pinned if name not in live.buckets)
    return cmp


def format_pin_board(board: PinBoard | None) -> str:
    """Return a table of all pinned snapshots."""
    if board is None or len(board) == 0:
        return "No pinned snapshots."

    lines = [
        f"{'LABEL':<20}  {'PINNED AT':<26}  {'BUCKETS':>8}  {'TOTAL KEYS':>12}",
        "-" * 72,
    ]
    for label in board.labels():
        pin = board.get(label)
        if pin is None:
            continue
        pinned_at = pin.pinned_at.strftime("%Y-%m-%d %H:%M:%S %Z").rstrip()
        lines.append(
            f"{pin.label:<20}  {pinned_at:<26}  "
            f"{len(pin.snapshot.buckets):>8d}  {pin.snapshot.total_keys():>12d}"
        )
    return "\n".join(lines) + "\n"


def format_pin_diff(pin: PinnedSnapshot | None, live: Snapshot | None) -> str:
    """Return a per-bucket summary of key changes since the pin."""
    if pin is None or live is None:
        return "Cannot diff: nil input."

    pinned = pin.snapshot.buckets
    lines = [
        f"Pin: {pin.label} (captured {pin.pinned_at.strftime('%Y-%m-%d %H:%M:%S')})",
        "-" * 50,
    ]
    for name, live_stat in live.buckets.items():
        pin_stat = pinned.get(name)
        if pin_stat is None:
            lines.append(f"  {name:<24} keys: {live_stat.keys} (new since pin)")
        else:
            delta = live_stat.keys - pin_stat.keys
            lines.append(f"  {name:<24} keys: {live_stat.keys} ({delta:+d} since pin)")
    lines.extend(
        f"  {name:<24} (removed since pin)" for name in pinned if name not in live.buckets
    )
    return "\n".join(lines) + "\n"