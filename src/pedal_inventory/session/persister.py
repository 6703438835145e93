"""Fire-and-forget persistence of session snapshots."""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any

from pedal_inventory.config.logging import get_logger

logger = get_logger(__name__)


class Persister:
    """Runs save callables without blocking the caller.

    With ``background=True`` a single worker thread executes saves in
    submission order, so the last submitted snapshot is the one left in
    storage. With ``background=False`` saves run inline.
    """

    def __init__(self, background: bool = True):
        self._executor: ThreadPoolExecutor | None = (
            ThreadPoolExecutor(max_workers=1, thread_name_prefix="persist-") if background else None
        )
        self._pending: list[Future] = []
        self._lock = threading.Lock()

    @property
    def background(self) -> bool:
        return self._executor is not None

    def submit(self, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule ``fn(*args)``. Failures are logged, never raised."""
        if self._executor is None:
            self._run(fn, *args)
            return
        fut = self._executor.submit(self._run, fn, *args)
        with self._lock:
            self._pending = [f for f in self._pending if not f.done()]
            self._pending.append(fut)

    @staticmethod
    def _run(fn: Callable[..., Any], *args: Any) -> None:
        try:
            fn(*args)
        except Exception as e:
            logger.warning("Background save failed: %s", e)

    def flush(self, timeout: float | None = None) -> None:
        """Wait for all scheduled saves to finish."""
        with self._lock:
            pending = list(self._pending)
            self._pending = []
        if pending:
            wait(pending, timeout=timeout)

    def close(self) -> None:
        """Flush and stop the worker."""
        self.flush()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
