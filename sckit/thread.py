"""A joinable worker thread that hands back its function's return value."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


class ThreadError(RuntimeError):
    """Raised when a thread cannot be started or its function failed."""


class Thread:
    """Runs ``fn(arg)`` on a separate thread and returns the result on join.

    Joining a thread that was never started, or one that was already
    joined, does nothing and gives ``None``. The instance can be reused
    once it has been joined. ``error`` holds the last error message.
    """

    def __init__(self) -> None:
        self._thread: threading.Thread | None = None
        self._result: Any = None
        self._exception: BaseException | None = None
        self.error = ""

    @property
    def running(self) -> bool:
        """Whether a started thread has not been joined yet."""
        return self._thread is not None

    def _run(self, fn: Callable[[Any], Any], arg: Any) -> None:
        try:
            self._result = fn(arg)
        except BaseException as exc:  # handed to the joining thread
            self._exception = exc

    def start(self, fn: Callable[[Any], Any], arg: Any) -> None:
        """Start running ``fn(arg)`` on a new thread."""
        if self._thread is not None:
            self.error = "thread is already started"
            raise ThreadError(self.error)
        self._result = None
        self._exception = None
        worker = threading.Thread(target=self._run, args=(fn, arg))
        try:
            worker.start()
        except RuntimeError as exc:
            self.error = str(exc)
            raise ThreadError(self.error) from exc
        self._thread = worker

    def join(self) -> Any:
        """Wait for the thread to finish and return what its function returned."""
        worker = self._thread
        if worker is None:
            return None
        worker.join()
        self._thread = None
        result, exception = self._result, self._exception
        self._result = None
        self._exception = None
        if exception is not None:
            self.error = str(exception)
            raise ThreadError(self.error) from exception
        return result

    def term(self) -> None:
        """Wait for the thread to finish, discarding its result."""
        self.join()

    def __enter__(self) -> Thread:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.term()