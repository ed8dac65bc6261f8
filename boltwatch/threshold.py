"""Checking bucket statistics against configured limits."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from boltwatch.snapshot import Snapshot, format_bytes


class ThresholdLevel(str, Enum):
    """Severity of a threshold breach."""

    WARNING = "WARNING"
    CRITICAL = "CRITICAL"

    def __str__(self) -> str:
        return self.value


@dataclass
class ThresholdConfig:
    """Key and size limits for one bucket; a limit of 0 is not checked."""

    bucket: str
    max_keys: int = 0
    max_size_bytes: int = 0
    level: ThresholdLevel = ThresholdLevel.WARNING


@dataclass(frozen=True)
class ThresholdViolation:
    """A single breached limit."""

    bucket: str
    field: str
    level: ThresholdLevel
    message: str


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def check_thresholds(
    snap: Snapshot | None, configs: Iterable[ThresholdConfig]
) -> list[ThresholdViolation]:
    """Return every limit the snapshot breaches; unknown buckets are skipped."""
    if snap is None or snap.is_empty():
        return []

    violations = []
    for cfg in configs:
        stats = snap.get(cfg.bucket)
        if stats is None:
            continue
        if cfg.max_keys > 0 and stats.keys > cfg.max_keys:
            violations.append(
                ThresholdViolation(
                    bucket=cfg.bucket,
                    field="keys",
                    level=cfg.level,
                    message=(
                        f"[{cfg.level}] bucket {_quote(cfg.bucket)} has {stats.keys} keys "
                        f"(limit: {cfg.max_keys})"
                    ),
                )
            )
        if cfg.max_size_bytes > 0 and stats.size > cfg.max_size_bytes:
            violations.append(
                ThresholdViolation(
                    bucket=cfg.bucket,
                    field="size",
                    level=cfg.level,
                    message=(
                        f"[{cfg.level}] bucket {_quote(cfg.bucket)} uses "
                        f"{format_bytes(stats.size)} (limit: {format_bytes(cfg.max_size_bytes)})"
                    ),
                )
            )
    return violations