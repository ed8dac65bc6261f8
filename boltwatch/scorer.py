"""Normalised scoring of buckets by keys, size and growth."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from boltwatch.snapshot import Snapshot

_GROWTH_SCORES = {"up": 1.0, "stable": 0.5, "down": 0.0}


@dataclass
class ScoreWeights:
    """Contribution of each metric to a bucket's score."""

    keys_weight: float = 0.5
    size_weight: float = 0.3
    growth_weight: float = 0.2


@dataclass(frozen=True)
class BucketScore:
    """A bucket's total score and the factors behind it."""

    bucket: str
    score: float
    keys_score: float
    size_score: float
    growth_score: float


def score_snapshot(
    snap: Snapshot | None,
    weights: ScoreWeights | None = None,
    trends: Mapping[str, str] | None = None,
) -> list[BucketScore]:
    """Score each bucket relative to the largest observed values.

    ``trends`` maps bucket names to "up", "stable" or "down" and feeds the
    growth component.
    """
    if snap is None or snap.is_empty():
        return []
    weights = weights if weights is not None else ScoreWeights()
    trends = trends or {}

    buckets = snap.buckets
    max_keys = max(b.keys for b in buckets.values())
    max_size = max(b.size for b in buckets.values())

    scores = []
    for name, stats in buckets.items():
        keys_score = stats.keys / max_keys if max_keys > 0 else 0.0
        size_score = stats.size / max_size if max_size > 0 else 0.0
        growth_score = _GROWTH_SCORES.get(trends.get(name, ""), 0.0)
        total = (
            keys_score * weights.keys_weight
            + size_score * weights.size_weight
            + growth_score * weights.growth_weight
        )
        scores.append(BucketScore(name, total, keys_score, size_score, growth_score))
    return scores