from boltwatch.ranker import RankConfig, rank_buckets
from boltwatch.snapshot import BucketStats, Snapshot


def make_ranker_snapshot(buckets):
    return Snapshot({name: BucketStats(keys=k, size=s) for name, (k, s) in buckets.items()})


def test_rank_none_snapshot():
    assert rank_buckets(None, RankConfig()) == []


def test_rank_empty_snapshot():
    assert rank_buckets(make_ranker_snapshot({}), RankConfig()) == []


def test_rank_order_by_score():
    snap = make_ranker_snapshot(
        {"small": (10, 1024), "large": (1000, 1048576), "medium": (100, 102400)}
    )
    result = rank_buckets(snap, RankConfig())
    assert [e.bucket for e in result] == ["large", "medium", "small"]
    assert result[0].rank == 1.0


def test_rank_top_n():
    snap = make_ranker_snapshot(
        {"a": (300, 3000), "b": (200, 2000), "c": (100, 1000), "d": (50, 500)}
    )
    result = rank_buckets(snap, RankConfig(top_n=2))
    assert [e.bucket for e in result] == ["a", "b"]


def test_rank_key_weight_only():
    snap = make_ranker_snapshot({"manykeys": (500, 100), "bigsize": (10, 999999)})
    result = rank_buckets(snap, RankConfig(key_weight=1.0, size_weight=0.0))
    assert len(result) == 2
    assert result[0].bucket == "manykeys"


def test_rank_score_range():
    snap = make_ranker_snapshot({"alpha": (100, 2048), "beta": (50, 1024)})
    for entry in rank_buckets(snap, RankConfig()):
        assert 0.0 <= entry.rank <= 1.0


def test_rank_ties_broken_by_name():
    snap = make_ranker_snapshot({"zeta": (5, 5), "alpha": (5, 5)})
    result = rank_buckets(snap, RankConfig())
    assert [e.bucket for e in result] == ["alpha", "zeta"]