"""Tests for MovieStoreClient against a mocked requests.Session."""

import pytest
import requests
from unittest.mock import MagicMock

from movieStore.store import (
    MovieStoreClient, Movie, MovieDraft, TransportError, DecodeError, StoreError,
)


def _response(status=200, payload=None, bad_json=False):
    resp = MagicMock()
    resp.status_code = status
    if bad_json:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def store(session):
    return MovieStoreClient(base_url="https://store.test/", timeout=3, session=session)


# ---------------------------------------------------------------------------
# list_movies
# ---------------------------------------------------------------------------


class TestListMovies:

    def test_single_record(self, store, session):
        session.request.return_value = _response(
            payload={"k1": {"title": "A", "openingText": "o", "releaseDate": "2020"}}
        )
        assert store.list_movies() == [Movie("k1", "A", "o", "2020")]
        session.request.assert_called_once_with(
            "GET", "https://store.test/movies.json", timeout=3
        )

    def test_ids_and_length_follow_keys(self, store, session):
        payload = {
            f"-N{i}": {"title": f"T{i}", "openingText": "x", "releaseDate": "1999"}
            for i in range(5)
        }
        session.request.return_value = _response(payload=payload)
        result = store.list_movies()
        assert len(result) == len(payload)
        assert [m.id for m in result] == list(payload)

    @pytest.mark.parametrize("payload", [{}, None])
    def test_empty_store(self, store, session, payload):
        session.request.return_value = _response(payload=payload)
        assert store.list_movies() == []

    def test_missing_fields_become_empty_strings(self, store, session):
        session.request.return_value = _response(payload={"k1": {"title": "A"}})
        assert store.list_movies() == [Movie("k1", "A", "", "")]

    def test_non_success_status(self, store, session):
        session.request.return_value = _response(status=503)
        with pytest.raises(TransportError) as exc:
            store.list_movies()
        assert exc.value.status_code == 503
        assert "503" in str(exc.value)

    def test_redirect_is_not_success(self, store, session):
        session.request.return_value = _response(status=302)
        with pytest.raises(TransportError):
            store.list_movies()

    def test_network_failure(self, store, session):
        session.request.side_effect = requests.ConnectionError("no route")
        with pytest.raises(TransportError) as exc:
            store.list_movies()
        assert exc.value.status_code is None
        assert "Could not reach" in str(exc.value)

    def test_invalid_json(self, store, session):
        session.request.return_value = _response(bad_json=True)
        with pytest.raises(DecodeError):
            store.list_movies()

    @pytest.mark.parametrize("payload", [[1, 2], "text", {"k1": "not a record"}])
    def test_wrong_shape(self, store, session, payload):
        session.request.return_value = _response(payload=payload)
        with pytest.raises(DecodeError):
            store.list_movies()


# ---------------------------------------------------------------------------
# add_movie
# ---------------------------------------------------------------------------


class TestAddMovie:

    def test_returns_movie_with_store_key(self, store, session):
        session.request.return_value = _response(payload={"name": "k9"})
        draft = MovieDraft("X", "opening", "2024-01-01")

        assert store.add_movie(draft) == Movie("k9", "X", "opening", "2024-01-01")
        session.request.assert_called_once_with(
            "POST",
            "https://store.test/movies.json",
            timeout=3,
            json={"title": "X", "openingText": "opening", "releaseDate": "2024-01-01"},
        )

    def test_non_success_status(self, store, session):
        session.request.return_value = _response(status=500)
        with pytest.raises(TransportError) as exc:
            store.add_movie(MovieDraft("X", "o", "2024"))
        assert "adding the movie" in str(exc.value)

    def test_missing_name(self, store, session):
        session.request.return_value = _response(payload={})
        with pytest.raises(DecodeError):
            store.add_movie(MovieDraft("X", "o", "2024"))


# ---------------------------------------------------------------------------
# delete_movie
# ---------------------------------------------------------------------------


class TestDeleteMovie:

    def test_deletes_by_id(self, store, session):
        session.request.return_value = _response(payload=None)
        assert store.delete_movie("-Nabc") is None
        session.request.assert_called_once_with(
            "DELETE", "https://store.test/movies/-Nabc.json", timeout=3
        )

    def test_twice_is_not_an_error(self, store, session):
        session.request.return_value = _response(payload=None)
        store.delete_movie("k1")
        store.delete_movie("k1")
        assert session.request.call_count == 2

    def test_id_is_path_quoted(self, store, session):
        session.request.return_value = _response(payload=None)
        store.delete_movie("a/b")
        assert session.request.call_args.args[1] == "https://store.test/movies/a%2Fb.json"

    def test_non_success_status(self, store, session):
        session.request.return_value = _response(status=401)
        with pytest.raises(StoreError):
            store.delete_movie("k1")
