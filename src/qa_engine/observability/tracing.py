"""Per-question stage timing."""

from __future__ import annotations

import time
from collections import defaultdict
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import uuid4


class QuestionTrace:
    """Accumulates wall time per pipeline stage for one question.

    Stages after ``search`` run once per candidate, so a stage can be entered
    many times; its durations add up and its entries are counted.
    """

    def __init__(self, trace_id: str | None = None) -> None:
        self.trace_id = trace_id or uuid4().hex
        self._started = time.perf_counter()
        self._stage_ms: dict[str, float] = defaultdict(float)
        self._stage_runs: dict[str, int] = defaultdict(int)

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        entered = time.perf_counter()
        try:
            yield
        finally:
            self._stage_ms[name] += (time.perf_counter() - entered) * 1000
            self._stage_runs[name] += 1

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._started) * 1000

    def stage_ms(self) -> dict[str, float]:
        return {name: round(ms, 2) for name, ms in self._stage_ms.items()}

    def stage_runs(self) -> dict[str, int]:
        return dict(self._stage_runs)
