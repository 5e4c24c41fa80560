"""Lightweight stopwatch and simple averaging profiler."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable

__all__ = ["DurationPrecision", "Stopwatch", "SimpleProfiler", "profile_loop"]

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def _default_clock() -> int:
    return time.monotonic_ns()


class DurationPrecision(enum.Enum):
    """Unit in which a measured duration is reported."""

    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"

    @property
    def suffix(self) -> str:
        """Unit text appended to log messages."""
        return f" {self.value}"

    def from_nanoseconds(self, elapsed_ns: int) -> float:
        """Convert an elapsed time in nanoseconds to this unit.

        The value is truncated to the next finer unit before the final
        division, giving three decimal places of resolution.
        """
        if self is DurationPrecision.MICROSECONDS:
            return elapsed_ns / 1000.0
        if self is DurationPrecision.SECONDS:
            return (elapsed_ns // 1_000_000) / 1000.0
        return (elapsed_ns // 1000) / 1000.0


class Stopwatch:
    """A stopwatch that starts on creation.

    ``stop()`` returns the elapsed time and stores it in ``result``. Used as a
    context manager, the stopwatch is stopped when the block exits.
    """

    def __init__(
        self,
        precision: DurationPrecision = DurationPrecision.MILLISECONDS,
        clock: Clock | None = None,
    ) -> None:
        self.precision = precision
        self._clock = clock if clock is not None else _default_clock
        self.result = 0.0
        self._start_ns = self._clock()

    def stop(self) -> float:
        """Measure the time since the last start, store and return it."""
        elapsed = self._clock() - self._start_ns
        self.result = self.precision.from_nanoseconds(elapsed)
        return self.result

    def restart(self) -> None:
        """Start measuring again from now."""
        self._start_ns = self._clock()

    def __enter__(self) -> Stopwatch:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


class SimpleProfiler:
    """Collects a fixed number of duration samples and logs their average."""

    def __init__(
        self,
        num_of_tests: int,
        message: str,
        precision: DurationPrecision = DurationPrecision.MILLISECONDS,
    ) -> None:
        self.num_of_tests = num_of_tests
        self.message = message
        self.precision = precision
        self.total = 0.0
        self.count = 0

    @property
    def average(self) -> float:
        """Mean of the samples collected so far (0.0 when empty)."""
        return self.total / self.count if self.count else 0.0

    @property
    def done(self) -> bool:
        return self.count >= self.num_of_tests

    def add_value(self, duration: float | None = None) -> bool:
        """Record one sample.

        ``None`` means no measurement has been taken yet and is accepted
        without being recorded. Returns False once enough samples have been
        collected; the average is logged when the last one arrives.
        """
        if duration is None:
            return True
        if self.done:
            return False
        self.total += duration
        self.count += 1
        if self.done:
            logger.info(
                "%s => sample count: %d average duration: %s%s",
                self.message,
                self.count,
                self.average,
                self.precision.suffix,
            )
        return True


def profile_loop(
    num_of_iterations: int,
    message: str,
    precision: DurationPrecision = DurationPrecision.MILLISECONDS,
    func: Callable[[], object] | None = None,
) -> float:
    """Call *func* repeatedly, log and return the average time per call."""
    if num_of_iterations <= 0:
        raise ValueError("num_of_iterations must be positive")
    if func is None:
        raise TypeError("func must be callable")
    with Stopwatch(precision) as watch:
        for _ in range(num_of_iterations):
            func()
    average = watch.result / num_of_iterations
    logger.info(
        "%s => sample count: %d average duration: %s%s",
        message,
        num_of_iterations,
        average,
        precision.suffix,
    )
    return average