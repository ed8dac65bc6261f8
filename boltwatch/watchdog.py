"""Detection of rapid growth and oversized buckets between snapshots."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from boltwatch.snapshot import Snapshot, format_bytes


class WatchdogLevel(IntEnum):
    """Severity of a watchdog event."""

    INFO = 0
    WARN = 1
    CRITICAL = 2

    def label(self) -> str:
        """Return a short label for the level."""
        if self is WatchdogLevel.CRITICAL:
            return "CRIT"
        if self is WatchdogLevel.WARN:
            return "WARN"
        return "INFO"

    def icon(self) -> str:
        """Return a coloured icon for the level."""
        if self is WatchdogLevel.CRITICAL:
            return "🔴"
        if self is WatchdogLevel.WARN:
            return "🟡"
        return "🟢"


@dataclass(frozen=True)
class WatchdogEvent:
    """A condition found while comparing snapshots."""

    bucket: str = ""
    level: WatchdogLevel = WatchdogLevel.INFO
    reason: str = ""


@dataclass
class WatchdogConfig:
    """Growth percentages that warn and absolute sizes that are critical."""

    max_key_growth_pct: float = 50.0
    max_size_growth_pct: float = 50.0
    critical_keys: int = 100_000
    critical_size: int = 500 * 1024 * 1024


def evaluate_watchdog(
    prev: Snapshot | None, curr: Snapshot | None, cfg: WatchdogConfig | None = None
) -> list[WatchdogEvent]:
    """Compare two snapshots and return the events they raise."""
    if prev is None or curr is None:
        return []
    cfg = cfg if cfg is not None else WatchdogConfig()

    events = []
    for name, cs in curr.buckets.items():
        ps = prev.buckets.get(name)
        if ps is not None and ps.keys > 0:
            growth = (cs.keys - ps.keys) / ps.keys * 100
            if growth >= cfg.max_key_growth_pct:
                events.append(
                    WatchdogEvent(
                        name,
                        WatchdogLevel.WARN,
                        f"key count grew {growth:.1f}% "
                        f"(threshold {cfg.max_key_growth_pct:.1f}%)",
                    )
                )
            if ps.size > 0:
                size_growth = (cs.size - ps.size) / ps.size * 100
                if size_growth >= cfg.max_size_growth_pct:
                    events.append(
                        WatchdogEvent(
                            name,
                            WatchdogLevel.WARN,
                            f"size grew {size_growth:.1f}% "
                            f"(threshold {cfg.max_size_growth_pct:.1f}%)",
                        )
                    )
        if cs.keys >= cfg.critical_keys:
            events.append(
                WatchdogEvent(
                    name,
                    WatchdogLevel.CRITICAL,
                    f"key count {cs.keys} exceeds critical threshold {cfg.critical_keys}",
                )
            )
        if cs.size >= cfg.critical_size:
            events.append(
                WatchdogEvent(
                    name,
                    WatchdogLevel.CRITICAL,
                    f"size {format_bytes(cs.size)} exceeds critical threshold "
                    f"{format_bytes(cfg.critical_size)}",
                )
            )
    return events


def format_watchdog_events(events: Sequence[WatchdogEvent] | None) -> str:
    """Render watchdog events as a report."""
    if not events:
        return "✅ Watchdog: no issues detected."
    lines = [f"⚠️  Watchdog: {len(events)} event(s) detected", "-" * 60]
    lines.extend(
        f"{e.level.icon()} [{e.level.label()}] {e.bucket:<20} {e.reason}" for e in events
    )
    return "\n".join(lines) + "\n"


def watchdog_summary(events: Sequence[WatchdogEvent] | None) -> str:
    """Return a one-line count of critical and warning events."""
    if not events:
        return "no issues"
    crit = sum(1 for e in events if e.level is WatchdogLevel.CRITICAL)
    warn = sum(1 for e in events if e.level is WatchdogLevel.WARN)
    return f"{crit} critical, {warn} warning(s)"