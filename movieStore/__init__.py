"""
movieStore
~~~~~~~~~~

Top-level package for the Movie Store application.

Exports:
  - MOVIE_STORE_URL, MOVIE_RETRY_DELAY_MS
  - Utility functions: log_debug, apply_dark_palette
  - Store client and data types: MovieStoreClient, Movie, MovieDraft
  - GUI entrypoint and state machine: MainWindow, MovieController
"""

# settings
from movieStore.settings import MOVIE_STORE_URL, MOVIE_RETRY_DELAY_MS

# utils
from movieStore.utils import log_debug, apply_dark_palette

# remote store
from movieStore.store import MovieStoreClient, Movie, MovieDraft

# GUI
from movieStore.gui.controller  import MovieController
from movieStore.gui.main_window import MainWindow

__all__ = [
    # settings
    "MOVIE_STORE_URL",
    "MOVIE_RETRY_DELAY_MS",
    # utils
    "log_debug",
    "apply_dark_palette",
    # store
    "MovieStoreClient",
    "Movie",
    "MovieDraft",
    # GUI
    "MovieController",
    "MainWindow",
]
