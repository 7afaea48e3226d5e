"""The book catalogue shown on the home page, with favourite toggling."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass

from shelfspace.database import DatabaseError

logger = logging.getLogger(__name__)

FAVORITE_ON = "★"
FAVORITE_OFF = "☆"


@dataclass(frozen=True)
class BookSummary:
    """A book as listed on the home page."""

    book_id: str
    title: str
    author: str
    image_url: str


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _summaries(rows) -> list[BookSummary]:
    return [
        BookSummary(_text(book_id), _text(title), _text(author), _text(image))
        for book_id, title, author, image in rows
    ]


def load_all_books(connection: sqlite3.Connection) -> list[BookSummary]:
    """Every book in the catalogue."""
    try:
        rows = connection.execute(
            "SELECT id, title, author, image FROM tbBooks"
        ).fetchall()
    except sqlite3.Error as exc:
        raise DatabaseError(f"failed to load books: {exc}") from exc
    return _summaries(rows)


def filter_books(connection: sqlite3.Connection, search_text: str) -> list[BookSummary]:
    """Books whose title, author, genre or year contains *search_text*, ignoring case."""
    pattern = f"%{search_text.lower()}%"
    try:
        rows = connection.execute(
            "SELECT id, title, author, image FROM tbBooks "
            "WHERE LOWER(title) LIKE :pattern OR LOWER(author) LIKE :pattern "
            "OR LOWER(genre) LIKE :pattern OR LOWER(year) LIKE :pattern",
            {"pattern": pattern},
        ).fetchall()
    except sqlite3.Error as exc:
        raise DatabaseError(f"failed to filter books: {exc}") from exc
    return _summaries(rows)


def is_book_favorite(connection: sqlite3.Connection, book_id: str) -> bool:
    """Whether the book is among the favourites; False if that cannot be checked."""
    try:
        row = connection.execute(
            "SELECT COUNT(*) FROM tbFavorites WHERE bookId = :id", {"id": book_id}
        ).fetchone()
    except sqlite3.Error:
        return False
    if row is None:
        return False
    return int(row[0] or 0) > 0


def add_to_favorites(connection: sqlite3.Connection, book_id: str) -> None:
    try:
        with connection:
            connection.execute(
                "INSERT INTO tbFavorites (bookId) VALUES (:id)", {"id": book_id}
            )
    except sqlite3.Error as exc:
        logger.debug("Failed to add to favorites: %s", exc)
        raise DatabaseError(f"failed to add to favorites: {exc}") from exc


def remove_from_favorites(connection: sqlite3.Connection, book_id: str) -> None:
    try:
        with connection:
            connection.execute(
                "DELETE FROM tbFavorites WHERE bookId = (:id)", {"id": book_id}
            )
    except sqlite3.Error as exc:
        logger.debug("Failed to remove from favorites for bookId %s: %s", book_id, exc)
        raise DatabaseError(f"failed to remove from favorites: {exc}") from exc
    logger.debug("Successfully removed from favorites for bookId: %s", book_id)


def set_favorite(connection: sqlite3.Connection, book_id: str, favorite: bool) -> str:
    """Add or remove the book from favourites and return the mark to show."""
    if favorite:
        add_to_favorites(connection, book_id)
    else:
        remove_from_favorites(connection, book_id)
    return favorite_mark(favorite)


def favorite_mark(favorite: bool) -> str:
    return FAVORITE_ON if favorite else FAVORITE_OFF


def render_title_author(title: str, author: str) -> str:
    """Rich text for a book's title and author line."""
    return (
        "<div style='line-height: 1.0;'><b style='font-size: 16px;'>"
        f"{title}"
        "</b><br/><span style='font-style: italic; font-size: 14px; color: gray;'>by "
        f"{author}"
        "</span></div>"
    )