"""Runs blocking calls off the GUI thread and reports back on it.

Each task gets a small relay ``QObject`` created on the GUI thread. The worker
emits the relay's signal and Qt queues delivery to the relay's own thread, so
``on_done`` always runs on the GUI thread.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any, Protocol

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

logger = logging.getLogger(__name__)


class TaskRunner(Protocol):
    """Anything that can run ``fn`` and hand its return value to ``on_done``."""

    def submit(
        self,
        fn: Callable[[], Any],
        on_done: Callable[[Any], None],
        on_error: Callable[[Exception], None] | None = None,
    ) -> None: ...


class _TaskRelay(QObject):
    finished = Signal(object)
    failed = Signal(object)

    def __init__(
        self,
        on_done: Callable[[Any], None],
        on_error: Callable[[Exception], None] | None,
        on_release: Callable[[_TaskRelay], None],
    ) -> None:
        super().__init__()
        self._on_done = on_done
        self._on_error = on_error
        self._on_release = on_release
        self.finished.connect(self._deliver_result)
        self.failed.connect(self._deliver_error)

    @Slot(object)
    def _deliver_result(self, value: object) -> None:
        self._on_release(self)
        self._on_done(value)

    @Slot(object)
    def _deliver_error(self, error: object) -> None:
        self._on_release(self)
        if self._on_error is not None:
            self._on_error(error)


class _CallableTask(QRunnable):
    def __init__(self, fn: Callable[[], Any], relay: _TaskRelay) -> None:
        super().__init__()
        self._fn = fn
        self._relay = relay

    def run(self) -> None:
        try:
            value = self._fn()
        except Exception as exc:
            logger.exception("Background task failed")
            self._relay.failed.emit(exc)
            return
        self._relay.finished.emit(value)


class BackgroundTaskRunner:
    """Task runner backed by a ``QThreadPool``.

    Requests are never cancelled; a task still running when the window closes
    is simply abandoned.
    """

    def __init__(self, pool: QThreadPool | None = None) -> None:
        self._pool = pool or QThreadPool.globalInstance()
        self._relays: set[_TaskRelay] = set()

    def submit(
        self,
        fn: Callable[[], Any],
        on_done: Callable[[Any], None],
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        relay = _TaskRelay(on_done, on_error, self._relays.discard)
        # Keep the relay alive until the worker reports back.
        self._relays.add(relay)
        self._pool.start(_CallableTask(fn, relay))

    def pending_count(self) -> int:
        return len(self._relays)
