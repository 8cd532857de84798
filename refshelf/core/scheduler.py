"""Background task scheduling shared by all update checks.

Work runs on a shared thread pool. Its result (or exception) is handed to
``dispatch``, which decides on which thread the callbacks run. The default
calls them inline on the worker; the Qt scheduler routes them to the GUI
thread.
"""

import functools
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

logger = logging.getLogger(__name__)

Work = Callable[[], Any]
SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[Exception], None]


def _call_inline(fn: Callable[[], None]):
    fn()


class TaskScheduler:
    """Immediate and delayed submission of work to one thread pool."""

    def __init__(self, max_workers: int = 2,
                 dispatch: Callable[[Callable[[], None]], None] | None = None):
        self._executor = ThreadPoolExecutor(max_workers=max_workers,
                                            thread_name_prefix='refshelf-task')
        self._dispatch = dispatch or _call_inline
        self._timers: set[threading.Timer] = set()
        self._lock = threading.Lock()
        self._closed = False

    def submit(self, work: Work, on_success: SuccessCallback,
               on_failure: FailureCallback):
        """Run ``work`` now on the pool and deliver its outcome."""
        with self._lock:
            if self._closed:
                logger.warning("Scheduler is shut down, dropping task")
                return
            self._executor.submit(self._run, work, on_success, on_failure)

    def submit_after(self, delay: float, work: Work, on_success: SuccessCallback,
                     on_failure: FailureCallback):
        """Like submit(), but only after ``delay`` seconds."""
        timer = threading.Timer(delay, lambda: self._fire(timer, work, on_success, on_failure))
        timer.daemon = True
        with self._lock:
            if self._closed:
                logger.warning("Scheduler is shut down, dropping delayed task")
                return
            self._timers.add(timer)
        timer.start()

    def shutdown(self):
        """Cancel delayed work that has not fired yet and stop the pool."""
        with self._lock:
            self._closed = True
            timers, self._timers = self._timers, set()
        for timer in timers:
            timer.cancel()
        self._executor.shutdown(wait=False, cancel_futures=True)

    # ── Internals ────────────────────────────────────────────────────

    def _fire(self, timer: threading.Timer, work: Work, on_success: SuccessCallback,
              on_failure: FailureCallback):
        with self._lock:
            self._timers.discard(timer)
        self.submit(work, on_success, on_failure)

    def _run(self, work: Work, on_success: SuccessCallback, on_failure: FailureCallback):
        try:
            result = work()
        except Exception as e:
            self._deliver(functools.partial(on_failure, e))
        else:
            self._deliver(functools.partial(on_success, result))

    def _deliver(self, fn: Callable[[], None]):
        try:
            self._dispatch(fn)
        except Exception:
            logger.exception("Task callback failed")
