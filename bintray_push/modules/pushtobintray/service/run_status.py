"""Shared state observed by the UI while a push is running."""

from __future__ import annotations

import threading
from concurrent.futures import Future
from contextlib import contextmanager
from typing import Iterator, List, Optional

from bintray_push.modules.pushtobintray.domain import PushOutcome


class RunStatus:
    """Completion flag, run log and result channel for the push action.

    At most one run holds ``running()`` at a time; a second caller blocks
    until the first one leaves. ``done`` is false only inside that window.
    The log is append-only and survives across runs.
    """

    def __init__(self) -> None:
        self._run_lock = threading.Lock()
        self._log_lock = threading.Lock()
        self._done = threading.Event()
        self._done.set()
        self._log: List[str] = []
        self._result: Optional[Future] = None

    @property
    def done(self) -> bool:
        return self._done.is_set()

    def wait_done(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)

    @property
    def result(self) -> Optional[Future]:
        """Future of the latest run, resolved with its PushOutcome."""
        return self._result

    def append(self, line: str) -> None:
        with self._log_lock:
            self._log.append(line)

    def lines(self, offset: int = 0) -> List[str]:
        with self._log_lock:
            return list(self._log[max(offset, 0):])

    def snapshot(self) -> dict:
        return {"done": self.done, "log": self.lines()}

    @contextmanager
    def running(self) -> Iterator[PushOutcome]:
        """Hold the run lock for one run and publish its outcome on exit."""
        self._run_lock.acquire()
        future: Future = Future()
        future.set_running_or_notify_cancel()
        outcome = PushOutcome()
        try:
            self._result = future
            self._done.clear()
            yield outcome
        finally:
            self._done.set()
            future.set_result(outcome)
            self._run_lock.release()
