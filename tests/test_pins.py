from datetime import datetime

from boltwatch.pins import (
    PinBoard,
    compare_to_pinned,
    format_pin_board,
    format_pin_diff,
)
from boltwatch.snapshot import BucketStats, Snapshot


def make_pinned_snapshot(keys):
    return Snapshot({"alpha": BucketStats(keys=keys, size=keys * 64)})


def make_format_pin_snapshot(buckets):
    return Snapshot({name: BucketStats(keys=k, size=k * 128) for name, k in buckets.items()})


def test_new_pin_board_empty():
    assert len(PinBoard()) == 0


def test_pin_none_snapshot_ignored():
    pb = PinBoard()
    pb.pin("test", None)
    assert len(pb) == 0


def test_pin_stores_snapshot():
    pb = PinBoard()
    pb.pin("baseline", make_pinned_snapshot(10))
    assert len(pb) == 1


def test_get_returns_pin():
    pb = PinBoard()
    s = make_pinned_snapshot(5)
    pb.pin("snap1", s)
    p = pb.get("snap1")
    assert p.label == "snap1"
    assert p.snapshot is s


def test_get_missing_label():
    assert PinBoard().get("missing") is None


def test_pin_replaces():
    pb = PinBoard()
    pb.pin("x", make_pinned_snapshot(1))
    s2 = make_pinned_snapshot(99)
    pb.pin("x", s2)
    assert len(pb) == 1
    assert pb.get("x").snapshot is s2


def test_remove():
    pb = PinBoard()
    pb.pin("del", make_pinned_snapshot(3))
    pb.remove("del")
    assert len(pb) == 0
    assert pb.labels() == []


def test_pinned_at_set():
    before = datetime.now().astimezone()
    pb = PinBoard()
    pb.pin("ts", make_pinned_snapshot(2))
    after = datetime.now().astimezone()
    assert before <= pb.get("ts").pinned_at <= after


def test_labels_in_insertion_order():
    pb = PinBoard()
    pb.pin("b", make_pinned_snapshot(1))
    pb.pin("a", make_pinned_snapshot(1))
    assert pb.labels() == ["b", "a"]


def test_format_pin_board_none():
    assert "No pinned" in format_pin_board(None)


def test_format_pin_board_empty():
    assert "No pinned" in format_pin_board(PinBoard())


def test_format_pin_board_contains_label():
    pb = PinBoard()
    pb.pin("release-v1", make_format_pin_snapshot({"users": 50}))
    out = format_pin_board(pb)
    assert "release-v1" in out
    assert "50" in out


def test_format_pin_board_contains_headers():
    pb = PinBoard()
    pb.pin("snap", make_format_pin_snapshot({"a": 1}))
    out = format_pin_board(pb)
    for hdr in ("LABEL", "PINNED AT", "BUCKETS", "TOTAL KEYS"):
        assert hdr in out


def test_format_pin_diff_none_inputs():
    assert "Cannot diff" in format_pin_diff(None, None)


def test_format_pin_diff_shows_delta():
    pb = PinBoard()
    pb.pin("old", make_format_pin_snapshot({"orders": 100}))
    out = format_pin_diff(pb.get("old"), make_format_pin_snapshot({"orders": 150}))
    assert "+50" in out


def test_format_pin_diff_shows_negative_delta():
    pb = PinBoard()
    pb.pin("old", make_format_pin_snapshot({"orders": 100}))
    out = format_pin_diff(pb.get("old"), make_format_pin_snapshot({"orders": 90}))
    assert "(-10 since pin)" in out


def test_format_pin_diff_shows_new_bucket():
    pb = PinBoard()
    pb.pin("base", make_format_pin_snapshot({"a": 10}))
    out = format_pin_diff(pb.get("base"), make_format_pin_snapshot({"a": 10, "b": 5}))
    assert "new since pin" in out


def test_format_pin_diff_shows_removed_bucket():
    pb = PinBoard()
    pb.pin("base", make_format_pin_snapshot({"a": 10, "gone": 7}))
    out = format_pin_diff(pb.get("base"), make_format_pin_snapshot({"a": 10}))
    assert "removed since pin" in out


def test_compare_to_pinned_categories():
    pb = PinBoard()
    pb.pin("base", make_format_pin_snapshot({"up": 1, "down": 5, "same": 3, "gone": 2}))
    live = make_format_pin_snapshot({"up": 4, "down": 1, "same": 3, "fresh": 9})
    cmp = compare_to_pinned(pb, "base", live)
    assert cmp.label == "base"
    assert cmp.grown == ["up"]
    assert cmp.shrunk == ["down"]
    assert cmp.unchanged == ["same"]
    assert cmp.new_buckets == ["fresh"]
    assert cmp.dropped == ["gone"]
    assert cmp.has_changes() is True


def test_compare_to_pinned_no_changes():
    pb = PinBoard()
    pb.pin("base", make_format_pin_snapshot({"a": 1}))
    cmp = compare_to_pinned(pb, "base", make_format_pin_snapshot({"a": 1}))
    assert cmp.has_changes() is False


def test_compare_to_pinned_missing():
    pb = PinBoard()
    assert compare_to_pinned(pb, "nope", make_format_pin_snapshot({"a": 1})) is None
    assert compare_to_pinned(None, "nope", make_format_pin_snapshot({"a": 1})) is None