from __future__ import annotations

import urllib.parse
from typing import Any

import requests

from movieStore.settings import MOVIE_STORE_URL, MOVIE_STORE_TIMEOUT
from movieStore.utils import log_debug
from movieStore.store.errors import DecodeError, TransportError
from movieStore.store.models import Movie, MovieDraft

LIST_OP   = "loading movies"
ADD_OP    = "adding the movie"
DELETE_OP = "deleting the movie"


class MovieStoreClient:
    """
    Thin wrapper around the remote JSON movie store.

    Holds no movie data between calls: no retries, no caching. Every
    failure is raised as a :class:`~movieStore.store.errors.StoreError`
    and the caller decides what to do about it.
    """

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or MOVIE_STORE_URL).rstrip("/")
        self.timeout  = MOVIE_STORE_TIMEOUT if timeout is None else timeout
        self.session  = session or requests.Session()

    def _request(self, method: str, path: str, operation: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            log_debug(f"store {method} {path} → no response: {exc}")
            raise TransportError(operation) from exc

        if not 200 <= resp.status_code < 300:
            log_debug(f"store {method} {path} → HTTP {resp.status_code}")
            raise TransportError(operation, resp.status_code)
        return resp

    @staticmethod
    def _json(resp: requests.Response, operation: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:           # requests' JSONDecodeError is a ValueError
            log_debug(f"store → undecodable body while {operation}: {exc}")
            raise DecodeError(operation) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def list_movies(self) -> list[Movie]:
        """
        Read the whole collection.

        The store answers with ``{key: {title, openingText, releaseDate}}``
        (or ``null`` when empty); each key becomes the movie id, in the
        order the store sent them.
        """
        data = self._json(self._request("GET", "/movies.json", LIST_OP), LIST_OP)
        if data is None:
            return []
        if not isinstance(data, dict):
            raise DecodeError(LIST_OP)

        movies: list[Movie] = []
        for key, body in data.items():
            if not isinstance(body, dict):
                raise DecodeError(LIST_OP)
            movies.append(Movie.from_record(key, body))

        log_debug(f"store → {len(movies)} movies")
        return movies

    def add_movie(self, draft: MovieDraft) -> Movie:
        """POST *draft*; the store answers ``{"name": <new key>}``."""
        resp = self._request("POST", "/movies.json", ADD_OP, json=draft.to_payload())
        data = self._json(resp, ADD_OP)
        key  = data.get("name") if isinstance(data, dict) else None
        if not isinstance(key, str) or not key:
            raise DecodeError(ADD_OP)

        log_debug(f"store → added “{draft.title}” as {key}")
        return draft.with_id(key)

    def delete_movie(self, movie_id: str) -> None:
        # unknown ids succeed too – the store's delete is idempotent
        path = f"/movies/{urllib.parse.quote(movie_id, safe='')}.json"
        self._request("DELETE", path, DELETE_OP)
        log_debug(f"store → deleted {movie_id}")
