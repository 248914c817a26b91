# src/core/timing.py — v1
"""Wall-clock timing of engine operations."""

from __future__ import annotations

import time

from basset.core.models import StatusOutcome, TimingRecord


class LoadingTimer:
    """Measures each engine call from start() to finish(status)."""

    def __init__(self) -> None:
        self._started: float | None = None
        self._records: list[TimingRecord] = []

    def start(self) -> None:
        self._started = time.perf_counter()

    def finish(self, status: StatusOutcome) -> StatusOutcome:
        """Record elapsed time for the running operation and pass status through."""
        elapsed = 0.0
        if self._started is not None:
            elapsed = (time.perf_counter() - self._started) * 1000.0
        self._started = None
        self._records.append(TimingRecord(status=status, elapsed_ms=elapsed))
        return status

    @property
    def last_ms(self) -> float:
        return self._records[-1].elapsed_ms if self._records else 0.0

    def timings(self) -> list[TimingRecord]:
        return list(self._records)

    def total_ms(self) -> float:
        return sum(r.elapsed_ms for r in self._records)
