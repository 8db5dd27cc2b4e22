"""
Log sink abstractions and concrete implementations.

Each sink renders on the calling thread and hands the finished line to its
own writer thread through a queue, so disk or stream latency never reaches
the caller. A single writer per sink keeps every line atomic.
"""

from __future__ import annotations

import atexit
import queue
import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TextIO

from structlog.typing import EventDict, Processor

from .exceptions import SinkInitError
from .processors import run_pipeline

_STOP = object()

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks.

    A sink owns a severity threshold and an ordered processor chain whose last
    step renders the record to a single line.

    Args:
        threshold: Highest rank this sink admits.
        processors: Enrichment/classification steps ending in a renderer.
        level: Level name the threshold came from, for introspection.
    """

    kind = "base"

    def __init__(self, threshold: int, processors: list[Processor], level: str | None = None):
        self.threshold = threshold
        self.level = level
        self.processors = list(processors)
        self.dropped = 0
        self._closed = False
        self._lock = threading.Lock()
        self._queue: queue.Queue = queue.Queue()
        self._writer = threading.Thread(
            target=self._drain,
            name=f"lisk-logger-{self.kind}-sink",
            daemon=True,
        )
        self._writer.start()
        atexit.register(self.close)

    @property
    def closed(self) -> bool:
        return self._closed

    def accepts(self, rank: int) -> bool:
        return rank <= self.threshold

    def render(self, event_dict: EventDict) -> str:
        """Run the processor chain over a copy of ``event_dict``."""
        return run_pipeline(self.processors, dict(event_dict), logger=self)

    def emit(self, event_dict: EventDict) -> None:
        """Render one record and queue it for the writer thread."""
        line = self.render(event_dict)
        with self._lock:
            if self._closed:
                raise ValueError(f"{self.kind} sink is closed")
            self._queue.put(line)

    def handle(self, event_dict: EventDict) -> bool:
        """Emit ``event_dict``, absorbing any failure. Returns False on drop."""
        try:
            self.emit(event_dict)
        except Exception:
            self._count_drop()
            return False
        return True

    def flush(self) -> None:
        """Block until every queued line has been written (or dropped)."""
        self._queue.join()

    def close(self) -> None:
        """Write out queued lines, stop the writer and release the target."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_STOP)
        if self._writer is not threading.current_thread():
            self._writer.join()
        self._release()

    def _drain(self) -> None:
        while True:
            line = self._queue.get()
            try:
                if line is _STOP:
                    return
                self._write(line)
            except Exception:
                self._count_drop()
            finally:
                self._queue.task_done()

    def _count_drop(self) -> None:
        with self._lock:
            self.dropped += 1

    @abstractmethod
    def _write(self, line: str) -> None:
        """Write one rendered line; only called from the writer thread."""
        ...

    @abstractmethod
    def _release(self) -> None:
        """Release the underlying resource after the writer has stopped."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} level={self.level!r} threshold={self.threshold}>"


class FileSink(BaseSink):
    """Append-only local file sink, one structured record per line."""

    kind = "file"

    def __init__(
        self,
        path: str | Path,
        threshold: int,
        processors: list[Processor],
        level: str | None = None,
    ):
        self.path = Path(path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file: TextIO = open(self.path, "a", encoding="utf-8")
        except OSError as exc:
            raise SinkInitError(sink=self.kind, target=str(self.path), reason=str(exc)) from exc
        super().__init__(threshold, processors, level)

    def _write(self, line: str) -> None:
        self._file.write(line + "\n")
        self._file.flush()

    def _release(self) -> None:
        if not self._file.closed:
            self._file.close()


class ConsoleSink(BaseSink):
    """Standard output sink rendering human-readable lines.

    Args:
        stream: Output stream. When omitted, the current ``sys.stdout`` is
            looked up on every write.
    """

    kind = "console"

    def __init__(
        self,
        threshold: int,
        processors: list[Processor],
        level: str | None = None,
        stream: Any = None,
    ):
        self._stream = stream
        super().__init__(threshold, processors, level)

    @property
    def stream(self) -> Any:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        stream = self.stream
        stream.write(line + "\n")
        stream.flush()

    def _release(self) -> None:
        pass
