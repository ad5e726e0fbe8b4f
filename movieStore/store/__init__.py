"""
store
~~~~~
Remote movie store: the HTTP client, its errors and the plain data types.
"""

from movieStore.store.client import MovieStoreClient
from movieStore.store.errors import StoreError, TransportError, DecodeError
from movieStore.store.models import (
    Movie, MovieDraft, RetryState,
    ViewState, Idle, Loading, Loaded, Failed, Retrying,
)

__all__ = [
    "MovieStoreClient",
    "StoreError", "TransportError", "DecodeError",
    "Movie", "MovieDraft", "RetryState",
    "ViewState", "Idle", "Loading", "Loaded", "Failed", "Retrying",
]
