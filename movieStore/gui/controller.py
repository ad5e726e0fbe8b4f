from __future__ import annotations
from typing import Any, Protocol

from PySide6.QtCore import QObject, QTimer, Signal, Slot # type: ignore

from movieStore.settings    import MOVIE_RETRY_DELAY_MS
from movieStore.utils       import log_debug
from movieStore.store       import MovieStoreClient, StoreError
from movieStore.store.models import (
    Movie, MovieDraft, RetryState,
    ViewState, Idle, Loading, Loaded, Failed, Retrying,
)
from movieStore.gui.workers import DoneCallback, ThreadRunner

GENERIC_ERROR = "Something went wrong."


class JobRunner(Protocol):
    def submit(self, fn: Any, on_done: DoneCallback) -> None: ...
    def shutdown(self) -> None: ...


def _message(error: BaseException) -> str:
    return str(error) if isinstance(error, StoreError) else GENERIC_ERROR


class MovieController(QObject):
    """
    Owns the fetch / retry / error state machine of the movie list.

    Client calls run through *runner* (worker threads by default); every
    completion comes back on the GUI thread, so the state below is only
    ever touched there. Subscribers listen to :attr:`state_changed`.

    Presentation precedence: Loading > Failed > Retrying > Loaded / Idle.
    """
    state_changed = Signal(object)        # ViewState
    retry_changed = Signal(int, bool)     # attempt_count, is_retrying

    def __init__(
        self,
        client: MovieStoreClient | None = None,
        runner: JobRunner | None = None,
        retry_delay_ms: int = MOVIE_RETRY_DELAY_MS,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.client = client or MovieStoreClient()
        self.runner = runner or ThreadRunner(self)

        self._movies: list[Movie] | None = None     # None == never loaded
        self._loading = False
        self._error: str | None = None
        self._retry = RetryState()
        self._fetch_token = 0
        # mutations confirmed while a list fetch is out; its answer may predate them
        self._added_in_flight: dict[str, Movie] = {}
        self._deleted_in_flight: set[str] = set()
        self._closed = False
        self._state: ViewState = Idle()

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(retry_delay_ms)
        self._timer.timeout.connect(self._on_retry_timeout)

    # ------------------------------------------------------------------
    # read-only views
    # ------------------------------------------------------------------
    @property
    def view_state(self) -> ViewState:
        return self._state

    @property
    def retry_state(self) -> RetryState:
        return self._retry

    @property
    def retry_pending(self) -> bool:
        return self._timer.isActive()

    # ------------------------------------------------------------------
    # user actions
    # ------------------------------------------------------------------
    @Slot()
    def fetch_movies(self) -> None:
        """Startup / "Fetch Movies": any state → Loading."""
        if self._closed:
            return
        # a newer fetch supersedes both the pending retry and any in-flight fetch
        self._timer.stop()
        self._fetch_token += 1
        token = self._fetch_token
        self._added_in_flight.clear()
        self._deleted_in_flight.clear()

        self._loading = True
        self._error = None
        self._publish()

        log_debug(f"fetch #{token} started (retry={self._retry})")
        self.runner.submit(
            self.client.list_movies,
            lambda movies, error: self._on_list_done(token, movies, error),
        )

    @Slot()
    def retry(self) -> None:
        if not isinstance(self._state, Failed):
            log_debug(f"retry ignored in {type(self._state).__name__}")
            return
        self._error = None
        self._set_retry(RetryState(1, True))
        self._publish()

    @Slot()
    def cancel(self) -> None:
        if not isinstance(self._state, (Failed, Retrying)):
            log_debug(f"cancel ignored in {type(self._state).__name__}")
            return
        self._fetch_token += 1              # late answers no longer apply
        self._loading = False
        self._error = None
        self._set_retry(RetryState())
        self._publish()

    def add_movie(self, draft: MovieDraft) -> None:
        draft.validate()
        if self._closed:
            return
        log_debug(f"add “{draft.title}” started")
        self.runner.submit(
            lambda: self.client.add_movie(draft),
            self._on_add_done,
        )

    @Slot(str)
    def delete_movie(self, movie_id: str) -> None:
        if self._closed:
            return
        log_debug(f"delete {movie_id} started")
        self.runner.submit(
            lambda: self.client.delete_movie(movie_id),
            lambda _none, error: self._on_delete_done(movie_id, error),
        )

    def shutdown(self) -> None:
        """Stop the retry timer and drop every outstanding answer."""
        if self._closed:
            return
        self._closed = True
        self._timer.stop()
        self._fetch_token += 1
        self.runner.shutdown()
        log_debug("controller shut down")

    # ------------------------------------------------------------------
    # completions (GUI thread)
    # ------------------------------------------------------------------
    def _on_list_done(self, token: int, movies: list[Movie] | None, error: BaseException | None) -> None:
        if self._closed or token != self._fetch_token:
            log_debug(f"fetch #{token} answer discarded (current #{self._fetch_token})")
            return

        self._loading = False
        if error is None:
            self._movies = self._reconcile(movies or ())
            self._set_retry(RetryState())
            log_debug(f"fetch #{token} ok: {len(self._movies)} movies")
        elif self._retry.is_retrying:
            # message stays hidden while auto-retrying
            self._set_retry(self._retry.next_attempt())
            log_debug(f"fetch #{token} failed, retry attempt {self._retry.attempt_count}: {error}")
        else:
            self._error = _message(error)
            log_debug(f"fetch #{token} failed: {error}")
        self._publish()

    def _on_add_done(self, movie: Movie | None, error: BaseException | None) -> None:
        if self._closed:
            return
        if error is not None:
            self._error = _message(error)
        else:
            if self._loading:
                self._added_in_flight[movie.id] = movie
                self._deleted_in_flight.discard(movie.id)
            self._movies = self._with_movie(self._movies or (), movie)
        self._publish()

    def _on_delete_done(self, movie_id: str, error: BaseException | None) -> None:
        if self._closed:
            return
        if error is not None:
            self._error = _message(error)
        else:
            if self._loading:
                self._deleted_in_flight.add(movie_id)
                self._added_in_flight.pop(movie_id, None)
            if self._movies is not None:
                self._movies = [m for m in self._movies if m.id != movie_id]
        self._publish()

    @Slot()
    def _on_retry_timeout(self) -> None:
        log_debug(f"auto-retry attempt {self._retry.attempt_count} firing")
        self.fetch_movies()

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------
    def _set_retry(self, new: RetryState) -> None:
        if new == self._retry:
            return
        count_changed = new.attempt_count != self._retry.attempt_count
        self._retry = new
        self.retry_changed.emit(new.attempt_count, new.is_retrying)

        if count_changed:
            # one pending timer at most
            self._timer.stop()
            if new.attempt_count > 0 and not self._closed:
                self._timer.start()

    @staticmethod
    def _with_movie(movies, movie: Movie) -> list[Movie]:
        """Append *movie*, or replace the entry that already has its id."""
        if any(m.id == movie.id for m in movies):
            return [movie if m.id == movie.id else m for m in movies]
        return [*movies, movie]

    def _reconcile(self, movies) -> list[Movie]:
        """Apply adds / deletes confirmed after the fetch went out."""
        result = [m for m in movies if m.id not in self._deleted_in_flight]
        for movie in self._added_in_flight.values():
            result = self._with_movie(result, movie)
        self._added_in_flight.clear()
        self._deleted_in_flight.clear()
        return result

    def _compute_state(self) -> ViewState:
        if self._loading:
            return Loading()
        held = tuple(self._movies or ())
        if self._error is not None:
            return Failed(self._error, held)
        if self._retry.is_retrying:
            return Retrying(self._retry.attempt_count)
        if self._movies is None:
            return Idle()
        return Loaded(held)

    def _publish(self) -> None:
        state = self._compute_state()
        if state == self._state:
            return
        self._state = state
        self.state_changed.emit(state)
