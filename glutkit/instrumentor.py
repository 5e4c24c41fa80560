"""Chrome-trace style function profiler writing JSON trace files."""

from __future__ import annotations

import atexit
import json
import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import IO

__all__ = [
    "ProfileResult",
    "Instrumentor",
    "InstrumentorTimer",
    "profile_scope",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileResult:
    """One timed scope: start in fractional microseconds, duration in whole microseconds."""

    name: str
    start: float
    elapsed: int
    thread_id: int


class Instrumentor:
    """Writes profile results of one session at a time into a trace file."""

    _instance: Instrumentor | None = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._session_name: str | None = None
        self._stream: IO[str] | None = None

    @property
    def session_name(self) -> str | None:
        """Name of the open session, or None when no session is open."""
        return self._session_name

    def begin_session(self, name: str, directory: str | Path, filename: str = "result.json") -> None:
        """Open a new session writing to ``directory/filename``.

        An already open session is closed first.
        """
        with self._lock:
            if self._session_name is not None:
                logger.error(
                    "Instrumentor.begin_session(%s) when session [%s] already open",
                    name,
                    self._session_name,
                )
                self._end_session_locked()

            directory = Path(directory)
            if not directory.exists():
                try:
                    directory.mkdir()
                except OSError:
                    logger.error("Failed to create folder")

            path = directory / filename
            try:
                stream = open(path, "w", encoding="utf-8")
            except OSError as err:
                logger.error("Instrumentor could not open file: %s", filename)
                raise OSError(f"Instrumentor could not open file: {path}") from err

            self._stream = stream
            self._session_name = name
            self._stream.write('{"otherData": {},"traceEvents":[{}')
            self._stream.flush()

    def end_session(self) -> None:
        """Close the open session, if any, completing the trace file."""
        with self._lock:
            self._end_session_locked()

    def write_profile(self, result: ProfileResult) -> None:
        """Append one result to the open session; ignored without a session."""
        entry = (
            ",{"
            '"cat":"function",'
            f'"dur":{int(result.elapsed)},'
            f'"name":{json.dumps(result.name)},'
            '"ph":"X",'
            '"pid":0,'
            f'"tid":{result.thread_id},'
            f'"ts":{result.start:.3f}'
            "}"
        )
        with self._lock:
            if self._stream is not None:
                self._stream.write(entry)
                self._stream.flush()

    @classmethod
    def get(cls) -> Instrumentor:
        """Return the process-wide instrumentor."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
                atexit.register(cls._instance.end_session)
            return cls._instance

    def _end_session_locked(self) -> None:
        if self._stream is not None:
            self._stream.write("]}")
            self._stream.flush()
            self._stream.close()
        self._stream = None
        self._session_name = None


class InstrumentorTimer:
    """Times a scope and reports it to an instrumentor when stopped."""

    def __init__(self, name: str, instrumentor: Instrumentor | None = None) -> None:
        self.name = name
        self._instrumentor = instrumentor
        self.stopped = False
        self._start_ns = time.perf_counter_ns()

    def stop(self) -> ProfileResult:
        """Stop timing, report the result and return it."""
        end_ns = time.perf_counter_ns()
        start_us = self._start_ns / 1000.0
        elapsed_us = end_ns // 1000 - self._start_ns // 1000
        result = ProfileResult(self.name, start_us, elapsed_us, threading.get_ident())
        target = self._instrumentor if self._instrumentor is not None else Instrumentor.get()
        target.write_profile(result)
        self.stopped = True
        return result

    def __enter__(self) -> InstrumentorTimer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.stopped:
            self.stop()


def profile_scope(name: str, instrumentor: Instrumentor | None = None) -> InstrumentorTimer:
    """Return a timer for use in a ``with`` block, reporting under *name*."""
    return InstrumentorTimer(name, instrumentor)