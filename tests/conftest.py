"""Shared fixtures for the movieStore test suite."""

import os
import tempfile
from pathlib import Path

# must be set before movieStore.settings is imported
os.environ["QT_QPA_PLATFORM"] = "offscreen"
os.environ["MOVIE_STORE_URL"] = "https://store.test"
os.environ["MOVIE_STORE_LOG"] = str(Path(tempfile.gettempdir()) / "movie_store_tests.log")

import pytest
from unittest.mock import MagicMock

from PySide6.QtWidgets import QApplication

from movieStore.store import MovieStoreClient, Movie
from movieStore.gui.controller import MovieController


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole run (timers and widgets need it)."""
    app = QApplication.instance() or QApplication([])
    yield app


class DeferredRunner:
    """Job runner that holds jobs until the test decides to run them."""

    def __init__(self):
        self.pending = []
        self.was_shut_down = False

    def submit(self, fn, on_done):
        self.pending.append((fn, on_done))

    def run_next(self, index=0):
        fn, on_done = self.pending.pop(index)
        try:
            value = fn()
        except Exception as e:
            on_done(None, e)
            return
        on_done(value, None)

    def run_all(self):
        while self.pending:
            self.run_next()

    def shutdown(self):
        self.was_shut_down = True


@pytest.fixture
def runner():
    return DeferredRunner()


@pytest.fixture
def client():
    """Store client double; set return_value / side_effect per test."""
    fake = MagicMock(spec=MovieStoreClient)
    fake.list_movies.return_value = []
    return fake


@pytest.fixture
def controller(client, runner):
    ctl = MovieController(client=client, runner=runner, retry_delay_ms=5000)
    yield ctl
    ctl.shutdown()


@pytest.fixture
def movies():
    return [
        Movie("k1", "A", "o", "2020"),
        Movie("k2", "B", "p", "2021"),
    ]
