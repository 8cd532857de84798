"""TaskScheduler whose callbacks run on the Qt GUI thread."""

import logging

from PyQt6.QtCore import QObject, Qt, QTimer, pyqtSignal

from refshelf.core.scheduler import (
    FailureCallback, SuccessCallback, TaskScheduler, Work,
)

logger = logging.getLogger(__name__)


class _GuiDispatcher(QObject):
    """Lives on the GUI thread; emitting from a worker queues the call there."""

    invoke = pyqtSignal(object)     # zero-argument callable

    def __init__(self, parent=None):
        super().__init__(parent)
        self.invoke.connect(self._run, Qt.ConnectionType.QueuedConnection)

    def _run(self, fn):
        # Unhandled exceptions in slots abort PyQt6 applications
        try:
            fn()
        except Exception:
            logger.exception("Task callback failed on GUI thread")


class QtTaskScheduler(TaskScheduler):
    """Must be created and used on the GUI thread, after QApplication.

    Delays run on the Qt event loop instead of timer threads.
    """

    def __init__(self, max_workers: int = 2, parent=None):
        self._dispatcher = _GuiDispatcher(parent)
        self._qtimers: set[QTimer] = set()
        super().__init__(max_workers=max_workers, dispatch=self._dispatcher.invoke.emit)

    def submit_after(self, delay: float, work: Work, on_success: SuccessCallback,
                     on_failure: FailureCallback):
        if self._closed:
            logger.warning("Scheduler is shut down, dropping delayed task")
            return
        timer = QTimer(self._dispatcher)
        timer.setSingleShot(True)
        timer.timeout.connect(
            lambda: self._fire_qtimer(timer, work, on_success, on_failure))
        self._qtimers.add(timer)
        timer.start(int(delay * 1000))

    def shutdown(self):
        timers, self._qtimers = self._qtimers, set()
        for timer in timers:
            timer.stop()
            timer.deleteLater()
        super().shutdown()

    def _fire_qtimer(self, timer: QTimer, work: Work, on_success: SuccessCallback,
                     on_failure: FailureCallback):
        self._qtimers.discard(timer)
        timer.deleteLater()
        self.submit(work, on_success, on_failure)
