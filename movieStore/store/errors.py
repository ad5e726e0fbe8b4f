"""
store.errors
~~~~~~~~~~~~
Everything the movie store client raises. ``str(exc)`` is the sentence
shown to the user.
"""
from __future__ import annotations


class StoreError(Exception):
    """Base class; *operation* reads like "loading movies"."""

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation


class TransportError(StoreError):
    """Non-2xx status, or the request never got an answer (status_code None)."""

    def __init__(self, operation: str, status_code: int | None = None):
        if status_code is None:
            msg = f"Could not reach the movie store while {operation}."
        else:
            msg = f"Something went wrong while {operation} (HTTP {status_code})."
        super().__init__(operation, msg)
        self.status_code = status_code


class DecodeError(StoreError):
    """Body was not the JSON shape the store promises."""

    def __init__(self, operation: str):
        super().__init__(
            operation,
            f"The movie store sent an unreadable response while {operation}.",
        )
