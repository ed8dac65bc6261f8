from boltwatch.sampler import Sampler
from boltwatch.snapshot import BucketStats, Snapshot


def make_snapshot(keys):
    return Snapshot({name: BucketStats(keys=k, size=k * 64) for name, k in keys.items()})


def test_default_max():
    assert Sampler(0).max_samples == 60
    assert Sampler(-3).max_samples == 60
    assert Sampler(7).max_samples == 7


def test_record_none():
    sampler = Sampler(10)
    sampler.record(None)
    assert len(sampler) == 0


def test_record_empty():
    sampler = Sampler(10)
    sampler.record(Snapshot())
    assert len(sampler) == 0


def test_record_adds_samples():
    sampler = Sampler(100)
    snap = make_snapshot({"users": 5, "orders": 3})
    sampler.record(snap)
    assert len(sampler) == 2
    users = sampler.for_bucket("users")[0]
    assert users.size == 320
    assert users.timestamp == snap.timestamp


def test_for_bucket():
    sampler = Sampler(100)
    sampler.record(make_snapshot({"users": 5, "orders": 3}))
    sampler.record(make_snapshot({"users": 7}))
    samples = sampler.for_bucket("users")
    assert [s.keys for s in samples] == [5, 7]
    assert sampler.for_bucket("missing") == []


def test_eviction():
    sampler = Sampler(3)
    for i in range(5):
        sampler.record(make_snapshot({"b": i}))
    assert len(sampler) == 3
    assert [s.keys for s in sampler.all()] == [2, 3, 4]


def test_all_returns_copy():
    sampler = Sampler(10)
    sampler.record(make_snapshot({"a": 1}))
    copied = sampler.all()
    copied.clear()
    assert len(sampler) == 1


def test_reset():
    sampler = Sampler(10)
    sampler.record(make_snapshot({"a": 1}))
    sampler.reset()
    assert len(sampler) == 0
    assert sampler.all() == []