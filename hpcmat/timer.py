"""Wall-clock timer that collects repeated measurements in milliseconds."""

from __future__ import annotations

import time


class CalcTime:
    """Accumulates durations between :meth:`start` and :meth:`end` calls.

    It can also be used as a context manager around the measured code.
    """

    def __init__(self) -> None:
        self.times: list[float] = []
        self._started: float | None = None

    def start(self) -> None:
        """Begin a measurement."""
        self._started = time.perf_counter()

    def end(self) -> None:
        """Finish the current measurement and record it in milliseconds."""
        if self._started is None:
            raise RuntimeError("end() called before start()")
        self.times.append((time.perf_counter() - self._started) * 1e3)

    def clear(self) -> None:
        """Discard all recorded measurements."""
        self.times.clear()

    def avg_time(self, drop_first: bool = True, clear: bool = True) -> float:
        """Mean of the recorded times in milliseconds.

        With ``drop_first`` the first, warm-up measurement is left out. With
        ``clear`` the measurements are discarded afterwards.
        """
        samples = self.times[1:] if drop_first else self.times
        if not samples:
            raise ValueError("not enough measurements to average")
        average = sum(samples) / len(samples)
        if clear:
            self.times.clear()
        return average

    def last_time(self) -> float:
        """Most recent measurement in milliseconds."""
        if not self.times:
            raise ValueError("no measurements recorded")
        return self.times[-1]

    def __enter__(self) -> CalcTime:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.end()
        return False