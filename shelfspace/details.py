"""A single book's details, its reviews and its favourite state."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from datetime import datetime

from shelfspace.catalog import (
    add_to_favorites,
    favorite_mark,
    is_book_favorite,
    remove_from_favorites,
)
from shelfspace.database import DatabaseError

logger = logging.getLogger(__name__)

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _to_int(value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class Review:
    """A review with the moment it was written, if known."""

    created: datetime | None
    text: str


@dataclass(frozen=True)
class BookDetails:
    """Everything shown about one book."""

    book_id: str
    title: str
    author: str
    year: int
    image_url: str
    genre: str
    description: str

    @property
    def heading(self) -> str:
        return f"<h2>{self.title}</h2>"


def parse_review_date(raw: str) -> datetime | None:
    """Parse an ISO 8601 date, with or without milliseconds; None if invalid."""
    candidate = raw.strip()
    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


def format_review_date(moment: datetime | None) -> str:
    """Format as "dd MMM yyyy, HH:mm"; an unknown moment gives an empty string."""
    if moment is None:
        return ""
    return (
        f"{moment.day:02d} {_MONTHS[moment.month - 1]} {moment.year:04d}, "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


def load_book_details(connection: sqlite3.Connection, book_id: str) -> BookDetails:
    """The book with *book_id*; LookupError if there is none."""
    try:
        row = connection.execute(
            "SELECT title, author, year, image, genre, description FROM tbBooks WHERE id = ?",
            (book_id,),
        ).fetchone()
    except sqlite3.Error as exc:
        logger.debug("Failed to load book: %s", exc)
        raise DatabaseError(f"failed to load book: {exc}") from exc
    if row is None:
        raise LookupError(f"no book with id {book_id}")
    title, author, year, image, genre, description = row
    return BookDetails(
        book_id=str(book_id),
        title=_text(title),
        author=_text(author),
        year=_to_int(year),
        image_url=_text(image),
        genre=_text(genre),
        description=_text(description),
    )


def load_reviews(connection: sqlite3.Connection, book_id: str) -> list[Review]:
    """The book's reviews, newest first."""
    try:
        rows = connection.execute(
            "SELECT dateCreated, text FROM tbReviews WHERE bookId = ? "
            "ORDER BY datetime(dateCreated) DESC",
            (book_id,),
        ).fetchall()
    except sqlite3.Error as exc:
        logger.debug("Failed to load reviews: %s", exc)
        raise DatabaseError(f"failed to load reviews: {exc}") from exc
    return [Review(parse_review_date(_text(raw)), _text(text)) for raw, text in rows]


def favorite_symbol(connection: sqlite3.Connection, book_id: str) -> str:
    """The star shown on the favourite button for this book."""
    return favorite_mark(is_book_favorite(connection, book_id))


def toggle_favorite(connection: sqlite3.Connection, book_id: str) -> str:
    """Flip the book's favourite state and return the new star."""
    if is_book_favorite(connection, book_id):
        remove_from_favorites(connection, book_id)
    else:
        add_to_favorites(connection, book_id)
    return favorite_symbol(connection, book_id)


def submit_review(
    connection: sqlite3.Connection, book_id: str, text: str
) -> Review | None:
    """Store a review; blank text stores nothing and gives None."""
    review_text = text.strip()
    if not review_text:
        return None
    try:
        with connection:
            connection.execute(
                "INSERT INTO tbReviews (bookId, text, dateCreated) "
                "VALUES (?, ?, datetime('now'))",
                (book_id, review_text),
            )
    except sqlite3.Error as exc:
        logger.debug("Failed to insert review: %s", exc)
        raise DatabaseError(f"failed to insert review: {exc}") from exc
    return Review(datetime.now(), review_text)


def render_review(review: Review) -> str:
    """Rich text for one review."""
    return f"<b>{format_review_date(review.created)}</b><br>{review.text}"