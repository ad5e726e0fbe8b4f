from __future__ import annotations
from typing import Any, Callable

from PySide6.QtCore import QObject, QThread, Signal, Slot # type: ignore

from movieStore.utils import log_debug

# on_done(value, error) – exactly one of the two is meaningful
DoneCallback = Callable[[Any, BaseException | None], None]


# ───────────────────────── Worker skeleton ────────────────────────────────
class _Job(QObject):
    finished = Signal(int, object, object)     # job id, value, error

    def __init__(self, job_id: int, fn: Callable[[], Any]):
        super().__init__()
        self.job_id = job_id
        self.fn = fn

    @Slot()
    def run(self):
        try:
            value = self.fn()
        except Exception as e:
            log_debug(f"job {self.job_id} error: {e!r}")
            self.finished.emit(self.job_id, None, e)
            return
        self.finished.emit(self.job_id, value, None)


# ───────────────────────── Runner used by the controller ──────────────────
class ThreadRunner(QObject):
    """
    Run each submitted callable on its own QThread and hand the outcome
    back on the thread that owns the runner (the GUI thread).

    The runner must be created on the GUI thread: ``_deliver`` is reached
    through a queued connection, so callbacks never run on a worker.
    """

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._next_id = 0
        self._running: dict[int, tuple[QThread, _Job, DoneCallback]] = {}

    def submit(self, fn: Callable[[], Any], on_done: DoneCallback) -> None:
        self._next_id += 1
        job = _Job(self._next_id, fn)
        thr = QThread()
        job.moveToThread(thr)

        job.finished.connect(self._deliver)
        job.finished.connect(job.deleteLater)
        thr.started.connect(job.run)

        self._running[job.job_id] = (thr, job, on_done)
        thr.start()

    @Slot(int, object, object)
    def _deliver(self, job_id: int, value: Any, error: Any) -> None:
        entry = self._running.pop(job_id, None)
        if entry is None:                   # dropped by shutdown()
            return
        thr, _job, on_done = entry
        self._retire(thr)
        on_done(value, error)

    def shutdown(self) -> None:
        """Forget pending callbacks and wait for running jobs to return."""
        running, self._running = self._running, {}
        for thr, _job, _ in running.values():
            self._retire(thr)

    @staticmethod
    def _retire(thr: QThread) -> None:
        # the job deleteLater()s itself on its own thread
        thr.quit()
        thr.wait()
