"""Bounded collection of per-bucket samples for trend analysis."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from boltwatch.snapshot import Snapshot

_DEFAULT_MAX = 60


@dataclass(frozen=True)
class Sample:
    """One measurement of a bucket at a point in time."""

    bucket: str
    keys: int
    size: int
    timestamp: datetime


class Sampler:
    """Keeps the most recent samples drawn from snapshots."""

    def __init__(self, max_samples: int = _DEFAULT_MAX) -> None:
        self._max = max_samples if max_samples > 0 else _DEFAULT_MAX
        self._samples: list[Sample] = []

    @property
    def max_samples(self) -> int:
        """The number of samples retained at most."""
        return self._max

    def record(self, snap: Snapshot | None) -> None:
        """Add one sample per bucket, evicting the oldest beyond capacity."""
        if snap is None or snap.is_empty():
            return
        self._samples.extend(
            Sample(bucket=name, keys=stats.keys, size=stats.size, timestamp=snap.timestamp)
            for name, stats in snap.buckets.items()
        )
        if len(self._samples) > self._max:
            del self._samples[: len(self._samples) - self._max]

    def all(self) -> list[Sample]:
        """Return a copy of all retained samples, oldest first."""
        return list(self._samples)

    def for_bucket(self, name: str) -> list[Sample]:
        """Return the retained samples of one bucket, oldest first."""
        return [s for s in self._samples if s.bucket == name]

    def __len__(self) -> int:
        return len(self._samples)

    def reset(self) -> None:
        """Discard all samples."""
        self._samples.clear()