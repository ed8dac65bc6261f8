"""Bucket statistics snapshots: paging, pins, pruning, ranking, scoring, replay, rollups, trends, thresholds, watchdog alerts and polling."""

__version__ = "0.1.0"