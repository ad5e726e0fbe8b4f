# Movie dataclasses + the view / retry state the controller publishes
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Movie:
    id: str
    title: str
    opening_text: str = ""
    release_date: str = ""

    @classmethod
    def from_record(cls, key: str, body: dict[str, Any]) -> "Movie":
        """Pair a store key with its record body."""
        return cls(
            id=key,
            title=str(body.get("title") or ""),
            opening_text=str(body.get("openingText") or ""),
            release_date=str(body.get("releaseDate") or ""),
        )

    def to_payload(self) -> dict[str, str]:
        return {
            "title":       self.title,
            "openingText": self.opening_text,
            "releaseDate": self.release_date,
        }


@dataclass(frozen=True, slots=True)
class MovieDraft:
    """What the user typed into the form; the store has not assigned an id yet."""
    title: str
    opening_text: str
    release_date: str

    def validate(self) -> None:
        """Raise ValueError naming the first empty field."""
        for label, value in (
            ("Title",        self.title),
            ("Opening text", self.opening_text),
            ("Release date", self.release_date),
        ):
            if not value.strip():
                raise ValueError(f"{label} is required.")

    def to_payload(self) -> dict[str, str]:
        return {
            "title":       self.title,
            "openingText": self.opening_text,
            "releaseDate": self.release_date,
        }

    def with_id(self, movie_id: str) -> Movie:
        return Movie(movie_id, self.title, self.opening_text, self.release_date)


# ── view state ────────────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Loaded:
    movies: tuple[Movie, ...] = ()


@dataclass(frozen=True, slots=True)
class Failed:
    message: str
    # list still held underneath the error (empty if nothing was ever loaded)
    movies: tuple[Movie, ...] = ()


@dataclass(frozen=True, slots=True)
class Retrying:
    attempt: int


ViewState = Union[Idle, Loading, Loaded, Failed, Retrying]


@dataclass(frozen=True, slots=True)
class RetryState:
    attempt_count: int = 0
    is_retrying: bool = False

    def __post_init__(self) -> None:
        if self.attempt_count < 0:
            raise ValueError("attempt_count cannot be negative")
        if self.attempt_count and not self.is_retrying:
            raise ValueError("attempt_count must be 0 while not retrying")

    def next_attempt(self) -> "RetryState":
        return RetryState(self.attempt_count + 1, True)
