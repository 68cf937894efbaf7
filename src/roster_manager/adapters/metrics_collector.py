"""
In-Memory Metrics Collector.

Keeps derivation timings and record counts for the running session, e.g.
``derive_view_seconds`` or ``records_filtered_total`` tagged by stage.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MetricSample:
    """One recorded value."""

    kind: str
    value: float
    tags: Dict[str, str] = field(default_factory=dict)
    recorded_at: datetime = field(default_factory=datetime.now)


class InMemoryMetricsCollector:
    """Metrics collector holding every sample in memory."""

    def __init__(self) -> None:
        self._samples: Dict[str, List[MetricSample]] = defaultdict(list)
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._add(name, MetricSample("timing", duration_seconds, dict(tags or {})))

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._add(name, MetricSample("count", value, dict(tags or {})))

    def get_metrics(self) -> Dict[str, Any]:
        """Per metric name: number of samples, their total and the last value."""
        with self._lock:
            return {
                name: {
                    "count": len(samples),
                    "total": sum(s.value for s in samples),
                    "last": samples[-1].value,
                }
                for name, samples in self._samples.items()
            }

    def samples(self, name: str) -> List[MetricSample]:
        with self._lock:
            return list(self._samples.get(name, []))

    def totals_by_tag(self, name: str, tag: str) -> Dict[str, float]:
        """
        Sum the samples of ``name`` grouped by the value of ``tag``.

        ``totals_by_tag("records_filtered_total", "stage")`` gives the number
        of records each filter stage rejected. Samples without the tag are
        skipped.
        """
        totals: Dict[str, float] = {}
        for sample in self.samples(name):
            if tag in sample.tags:
                key = sample.tags[tag]
                totals[key] = totals.get(key, 0) + sample.value
        return totals

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def _add(self, name: str, sample: MetricSample) -> None:
        with self._lock:
            self._samples[name].append(sample)
