# boltwatch

Tools for working with point-in-time statistics of the buckets in a
key-value database: how many keys each bucket holds and how many bytes it
uses. A `Snapshot` (in `boltwatch.snapshot`) records those figures for a set
of `BucketStats(name, keys, size)` at one moment. Every other part of the
package works on snapshots.

## What is in the package

- `boltwatch.snapshot`: `BucketStats`, `Snapshot` (`is_empty`, `total_keys`,
  `total_size`, `get`, `bucket_names`) and `format_bytes`.
- `boltwatch.pager`: `paginate_snapshot(snap, opts)` returns a `Page`
  (`total_pages`, `has_next`, `has_prev`). The page size comes from
  `PageOptions`, which defaults to page 1 and 10 items.
- `boltwatch.pins`: a `PinBoard` keeps labelled snapshots as baselines.
  `compare_to_pinned(board, label, live)` returns a `PinComparison` that
  lists new, dropped, grown, shrunk and unchanged buckets, and also offers
  `has_changes()`. `format_pin_board` and `format_pin_diff` render text
  tables.
- `boltwatch.pruner`: `prune_snapshot` drops buckets that have fewer than
  `min_keys` keys. `prune_history` drops snapshots older than `max_age` and
  then keeps only the newest `max_count`. Both are configured with
  `PruneOptions`.
- `boltwatch.ranker`: `rank_buckets(snap, RankConfig)` ranks buckets by a
  weighted mix of normalised key count and size.
- `boltwatch.reducer`: `reduce_snapshot(snap, ReduceConfig)` keeps the most
  significant buckets, and `format_reduced` prints them.
- `boltwatch.scorer`: `score_snapshot(snap, ScoreWeights, trends)` scores
  buckets by keys, size and an optional `"up"` / `"stable"` / `"down"`
  trend for each bucket.
- `boltwatch.replay`: `replay_history(snapshots, ReplayOptions)` picks
  snapshots in chronological order within an optional time window and at a
  minimum step. It raises `ValueError` when it is given no history.
  `format_replay` summarises the result.
- `boltwatch.rollup`: `rollup_snapshots(snapshots, RollupPeriod)` computes
  averages and maxima for each bucket. `format_rollup` renders them as a
  table.
- `boltwatch.sampler`: a `Sampler` keeps a bounded list of per-bucket
  `Sample`s (60 by default).
- `boltwatch.threshold`: `check_thresholds(snap, configs)` tests buckets
  against `ThresholdConfig` limits and returns `ThresholdViolation`s.
- `boltwatch.trend`: `compute_trends(history)` compares the oldest snapshot
  with the newest and returns a `TrendDirection` for the keys and for the
  size of each bucket.
- `boltwatch.watchdog`: `evaluate_watchdog(prev, curr, WatchdogConfig)`
  flags fast growth (as warnings) and critical key counts or sizes.
  `format_watchdog_events` and `watchdog_summary` report what it found.
- `boltwatch.options`: `WatchOptions` is an immutable set of polling
  settings (interval, verbosity, bucket prefix, minimum keys) with `with_*`
  copy methods.
- `boltwatch.watcher`: a `Watcher(collector, interval)` calls a
  zero-argument collector straight away and then once every interval, until
  a `threading.Event` is set. Each result is passed to `on_update`, and any
  exception is passed to `on_error`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Example

```python
from boltwatch.snapshot import BucketStats, Snapshot
from boltwatch.ranker import RankConfig, rank_buckets
from boltwatch.watchdog import WatchdogConfig, evaluate_watchdog, watchdog_summary

before = Snapshot([BucketStats(name="users", keys=100, size=4096)])
after = Snapshot([BucketStats(name="users", keys=200, size=8192)])

for entry in rank_buckets(after, RankConfig()):
    print(entry.bucket, entry.rank)          # users 1.0

events = evaluate_watchdog(before, after, WatchdogConfig())
print(watchdog_summary(events))              # 0 critical, 2 warning(s)
```

## What the package does not do

The package does not open or read database files. You supply the bucket
statistics, for example through the collector callable that you pass to a
`Watcher`. `WatchOptions` only holds settings: the `Watcher` does not read
them by itself. The package has no command-line program and does not
store snapshots anywhere outside memory.

## Running the tests

```
pytest
```