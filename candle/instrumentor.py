"""Profiling sessions written in the Chrome trace-event JSON format."""

from __future__ import annotations

import os
import threading
import time
from dataclasses import dataclass
from typing import IO, ClassVar

from candle import log

_HEADER = '{"otherData": {},"traceEvents":[{}'
_FOOTER = "]}"


@dataclass(frozen=True)
class ProfileResult:
    """One timed scope: start and duration in microseconds."""

    name: str
    start: float
    elapsed_time: int
    thread_id: int


class Instrumentor:
    """Writes profile results to the file of the current session."""

    _instance: ClassVar[Instrumentor | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._session: str | None = None
        self._stream: IO[str] | None = None

    @classmethod
    def get(cls) -> Instrumentor:
        """The process-wide instrumentor."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def session(self) -> str | None:
        """Name of the open session, or None."""
        return self._session

    @property
    def active(self) -> bool:
        return self._session is not None

    def begin_session(self, name: str, filepath: str | os.PathLike[str] = "results.json") -> None:
        """Open a session writing to ``filepath``, closing any open one first."""
        with self._lock:
            logger = log.core_logger()
            if self._session is not None:
                if logger is not None:
                    logger.error(
                        "Instrumentor::BeginSession('%s') when session '%s' already open.",
                        name,
                        self._session,
                    )
                self._end_session()
            try:
                self._stream = open(filepath, "w", encoding="utf-8")
            except OSError:
                if logger is not None:
                    logger.error("Instrumentor could not open results file '%s'.", filepath)
                return
            self._session = name
            self._stream.write(_HEADER)
            self._stream.flush()

    def end_session(self) -> None:
        with self._lock:
            self._end_session()

    def write_profile(self, result: ProfileResult) -> None:
        """Append one trace event to the open session, if any."""
        entry = (
            ',{"cat":"function",'
            f'"dur":{result.elapsed_time},'
            f'"name":"{result.name}",'
            '"ph":"X",'
            '"pid":0,'
            f'"tid":{result.thread_id},'
            f'"ts":{result.start:.3f}'
            "}"
        )
        with self._lock:
            if self._session is not None and self._stream is not None:
                self._stream.write(entry)
                self._stream.flush()

    def _end_session(self) -> None:
        if self._session is None or self._stream is None:
            return
        self._stream.write(_FOOTER)
        self._stream.flush()
        self._stream.close()
        self._stream = None
        self._session = None

    def __enter__(self) -> Instrumentor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.end_session()


class InstrumentationTimer:
    """Times a scope from creation until :meth:`stop` or leaving the ``with`` block."""

    def __init__(self, name: str, instrumentor: Instrumentor | None = None) -> None:
        self.name = name
        self._instrumentor = instrumentor
        self._start_ns = time.perf_counter_ns()
        self.stopped = False

    def stop(self) -> ProfileResult:
        """Record the elapsed time and return the result written."""
        end_ns = time.perf_counter_ns()
        elapsed = end_ns // 1000 - self._start_ns // 1000
        result = ProfileResult(
            self.name, self._start_ns / 1000.0, elapsed, threading.get_ident()
        )
        instrumentor = self._instrumentor or Instrumentor.get()
        instrumentor.write_profile(result)
        self.stopped = True
        return result

    def __enter__(self) -> InstrumentationTimer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.stopped:
            self.stop()


def cleanup_output_string(expr: str, remove: str) -> str:
    """Drop occurrences of ``remove`` and turn double quotes into single quotes.

    After a removed occurrence the next character is always kept.
    """
    result: list[str] = []
    src = 0
    while src < len(expr):
        matched = 0
        while (
            matched < len(remove)
            and src + matched < len(expr)
            and expr[src + matched] == remove[matched]
        ):
            matched += 1
        if remove and matched == len(remove):
            src += matched
        if src < len(expr):
            char = expr[src]
            result.append("'" if char == '"' else char)
        src += 1
    return "".join(result)