# stream.py
# Runs a search on a worker thread and hands solutions to the caller

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import Generator, Optional

from config import STREAM_BUFFER_SIZE, STREAM_JOIN_TIMEOUT, STREAM_POLL_INTERVAL
from logging_utils import get_logger
from problem import Solution

logger = get_logger("stream")

_DONE = object()


@dataclass(frozen=True)
class _Failed:
    error: BaseException


class SolutionStream:
    """
    Iterator over the solutions produced by a search running on its own thread.

    The worker may run at most ``buffer_size`` solutions ahead of the
    consumer. Calling close() (or leaving a ``with`` block) tells the worker
    to stop at its next solution; the search generator is then closed so its
    cleanup runs on the worker. When the search was given the same ``stop``
    event it also gives up between solutions. Errors raised by the search are
    re-raised from ``next()``. A stream cannot be restarted.
    """

    def __init__(
        self,
        solutions: Generator[Solution, None, None],
        buffer_size: int = STREAM_BUFFER_SIZE,
        stop: Optional[threading.Event] = None,
    ):
        self._queue: queue.Queue = queue.Queue(maxsize=buffer_size)
        self._stop = stop if stop is not None else threading.Event()
        self._finished = False
        self._thread = threading.Thread(
            target=self._produce,
            args=(solutions,),
            name="algorithmx-search",
            daemon=True,
        )
        self._thread.start()

    def _put(self, entry: object) -> bool:
        while not self._stop.is_set():
            try:
                self._queue.put(entry, timeout=STREAM_POLL_INTERVAL)
                return True
            except queue.Full:
                continue
        return False

    def _produce(self, solutions: Generator[Solution, None, None]) -> None:
        count = 0
        try:
            for solution in solutions:
                if not self._put(solution):
                    logger.debug("Stream closed after %d solutions, stopping search", count)
                    return
                count += 1
        except Exception as exc:
            logger.error("Search failed after %d solutions: %s", count, exc)
            self._put(_Failed(exc))
            return
        finally:
            solutions.close()
        logger.debug("Search finished with %d solutions", count)
        self._put(_DONE)

    def __iter__(self) -> SolutionStream:
        return self

    def __next__(self) -> Solution:
        if self._finished:
            raise StopIteration
        entry = self._queue.get()
        if entry is _DONE:
            self._finished = True
            self._thread.join()
            raise StopIteration
        if isinstance(entry, _Failed):
            self._finished = True
            raise entry.error
        return entry

    def close(self) -> None:
        self._finished = True
        self._stop.set()
        self._thread.join(STREAM_JOIN_TIMEOUT)
        if self._thread.is_alive():
            logger.warning("Search thread still running %.1fs after close()", STREAM_JOIN_TIMEOUT)

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def __enter__(self) -> SolutionStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None
