"""Tests for ThreadRunner: jobs run off the GUI thread, results come back on it."""

import threading
import time

from PySide6.QtCore import QCoreApplication

from movieStore.gui.workers import ThreadRunner


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.01)
    return predicate()


def test_result_delivered_on_gui_thread():
    runner = ThreadRunner()
    gui_thread = threading.get_ident()
    job_threads, results = [], []

    def job():
        job_threads.append(threading.get_ident())
        return 42

    runner.submit(job, lambda value, error: results.append((value, error, threading.get_ident())))

    assert _wait_for(lambda: results)
    value, error, thread = results[0]
    assert (value, error) == (42, None)
    assert thread == gui_thread
    assert job_threads[0] != gui_thread


def test_exception_is_handed_to_callback():
    runner = ThreadRunner()
    results = []

    def job():
        raise RuntimeError("boom")

    runner.submit(job, lambda value, error: results.append((value, error)))

    assert _wait_for(lambda: results)
    value, error = results[0]
    assert value is None
    assert isinstance(error, RuntimeError)


def test_shutdown_drops_callbacks():
    runner = ThreadRunner()
    results = []
    runner.submit(lambda: time.sleep(0.05), lambda value, error: results.append(value))

    runner.shutdown()
    for _ in range(20):
        QCoreApplication.processEvents()
        time.sleep(0.01)
    assert results == []
