"""Weighted ranking of buckets by key count and size."""

from __future__ import annotations

from dataclasses import dataclass

from boltwatch.snapshot import Snapshot


@dataclass
class RankEntry:
    """A bucket with its computed rank."""

    bucket: str
    keys: int
    size: int
    rank: float


@dataclass
class RankConfig:
    """Weights for normalised key count and size; ``top_n`` 0 means all."""

    key_weight: float = 0.5
    size_weight: float = 0.5
    top_n: int = 0


def rank_buckets(snap: Snapshot | None, cfg: RankConfig | None = None) -> list[RankEntry]:
    """Rank buckets by a weighted mix of normalised keys and size, best first."""
    if snap is None or snap.is_empty():
        return []
    cfg = cfg if cfg is not None else RankConfig()

    stats = snap.buckets
    max_keys = max(b.keys for b in stats.values())
    max_size = max(b.size for b in stats.values())

    def rank_of(keys: int, size: int) -> float:
        norm_keys = keys / max_keys if max_keys > 0 else 0.0
        norm_size = size / max_size if max_size > 0 else 0.0
        return cfg.key_weight * norm_keys + cfg.size_weight * norm_size

    entries = sorted(
        (RankEntry(name, b.keys, b.size, rank_of(b.keys, b.size)) for name, b in stats.items()),
        key=lambda e: (-e.rank, e.bucket),
    )
    if 0 < cfg.top_n < len(entries):
        return entries[: cfg.top_n]
    return entries