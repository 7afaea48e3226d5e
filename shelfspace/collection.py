"""The favourites collection: a searchable list of the user's favourite books."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field

from shelfspace.database import DatabaseError

logger = logging.getLogger(__name__)

_FAVORITES_QUERY = """
    SELECT f.id AS favorite_id, b.id AS book_id, b.title, b.author, b.genre, b.year, b.image
    FROM tbFavorites f
    JOIN tbBooks b ON f.bookId = b.id
    ORDER BY b.title
"""


def _text(value: object) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class FavoriteEntry:
    """One row of the favourites collection."""

    favorite_id: str
    book_id: str
    title: str
    author: str
    genre: str
    year: str
    image_url: str


def matches_filter(entry: FavoriteEntry, filter_text: str) -> bool:
    """Whether the entry's title, author, genre and year contain *filter_text*, ignoring case."""
    needle = filter_text.strip()
    if not needle:
        return True
    haystack = " ".join((entry.title, entry.author, entry.genre, entry.year))
    return needle.casefold() in haystack.casefold()


@dataclass
class CollectionView:
    """The favourites list together with its current search text."""

    connection: sqlite3.Connection
    search_text: str = ""
    entries: list[FavoriteEntry] = field(default_factory=list)

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        self.search_text = ""
        self.entries = []
        self.load_books()

    def load_books(self) -> list[FavoriteEntry]:
        """Reload the favourites, applying the current search text."""
        try:
            rows = self.connection.execute(_FAVORITES_QUERY).fetchall()
        except sqlite3.Error as exc:
            logger.debug("Failed to execute query: %s", exc)
            raise DatabaseError(f"failed to load books: {exc}") from exc
        entries = (
            FavoriteEntry(*(_text(value) for value in row)) for row in rows
        )
        self.entries = [
            entry for entry in entries if matches_filter(entry, self.search_text)
        ]
        return self.entries

    def set_search_text(self, text: str) -> list[FavoriteEntry]:
        """Change the search text and reload with it applied."""
        self.search_text = text
        return self.load_books()

    def remove(self, favorite_id: str | None) -> list[FavoriteEntry]:
        """Remove the favourite with *favorite_id* and reload the list."""
        if favorite_id is None:
            raise ValueError("No book selected.")
        try:
            with self.connection:
                self.connection.execute(
                    "DELETE FROM tbFavorites WHERE id = :id", {"id": favorite_id}
                )
        except sqlite3.Error as exc:
            logger.debug("Failed to remove favorite for ID %s: %s", favorite_id, exc)
            raise DatabaseError(f"failed to remove favorite: {exc}") from exc
        logger.debug("Successfully removed favorite with ID: %s", favorite_id)
        return self.load_books()

    def confirmation_prompt(self, entry: FavoriteEntry) -> str:
        """The question asked before removing *entry*."""
        return (
            f'Are you sure you want to remove "{entry.title}" from your favorites?'
        )

    def describe(self, entry: FavoriteEntry) -> str:
        """The message shown when an entry is opened."""
        return f"You double-clicked: {entry.title}\n by {entry.author}"