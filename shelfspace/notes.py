"""Personal notes attached to favourite books."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable

from shelfspace.database import DatabaseError

logger = logging.getLogger(__name__)

NOTES_TABLE = "tbNotesLocal"

_CREATE_NOTES_TABLE = (
    "CREATE TABLE IF NOT EXISTS tbNotesLocal ("
    "bookId TEXT NOT NULL, "
    "dateCreated TEXT NOT NULL, "
    "dateModified TEXT NOT NULL, "
    "title TEXT NOT NULL, "
    "text TEXT"
    ");"
)


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _to_int(value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


def _table_names(connection: sqlite3.Connection) -> set[str]:
    rows = connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {name for (name,) in rows}


@dataclass(frozen=True)
class Note:
    """A note as listed under its book."""

    book_id: str
    title: str
    date_created: str


@dataclass(frozen=True)
class FavoriteBook:
    """A favourite book shown on the notes page."""

    book_id: str
    title: str
    author: str
    year: int
    image_url: str


def ensure_notes_table(connection: sqlite3.Connection) -> bool:
    """Create the notes table if it is missing; True if it was created."""
    if NOTES_TABLE in _table_names(connection):
        logger.debug("Table already exists")
        return False
    try:
        connection.execute(_CREATE_NOTES_TABLE)
    except sqlite3.Error as exc:
        logger.debug("Failed to create table: %s", exc)
        raise DatabaseError(f"failed to create notes table: {exc}") from exc
    logger.debug("Table created successfully")
    return True


def timestamp(moment: datetime) -> str:
    """Format as yyyy-MM-ddThh:mm:ss.zzz (milliseconds)."""
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}"


def default_title(today: date) -> str:
    """The title given to a note saved without one."""
    return f"Note {today:%d/%m}"


def save_note(
    connection: sqlite3.Connection,
    book_id: str,
    date_created: str,
    title: str,
    text: str,
) -> str:
    """Store a new note and return the title it was stored under."""
    ensure_notes_table(connection)
    stored_title = title
    if title == "":
        stored_title = default_title(date.today())
        logger.debug("No provided title, making one automatically: %s", stored_title)
    try:
        with connection:
            connection.execute(
                "INSERT INTO tbNotesLocal (bookId, dateCreated, dateModified, title, text) "
                "VALUES (?, ?, ?, ?, ?)",
                (book_id, date_created, timestamp(datetime.now()), stored_title, text),
            )
    except sqlite3.Error as exc:
        logger.debug("Failed to insert note: %s", exc)
        raise DatabaseError(f"failed to insert note: {exc}") from exc
    return stored_title


def edit_note(
    connection: sqlite3.Connection,
    book_id: str,
    date_created: str,
    new_title: str,
    new_text: str,
) -> int:
    """Update the note identified by book and creation date; return rows changed."""
    try:
        with connection:
            cursor = connection.execute(
                "UPDATE tbNotesLocal SET title = ?, text = ?, dateModified = ? "
                "WHERE bookId = ? AND dateCreated = ?",
                (new_title, new_text, timestamp(datetime.now()), book_id, date_created),
            )
    except sqlite3.Error as exc:
        logger.debug("Edit failed: %s", exc)
        raise DatabaseError(f"failed to edit note: {exc}") from exc
    return cursor.rowcount


def load_note_text(
    connection: sqlite3.Connection, book_id: str, date_created: str, title: str
) -> str:
    """The body of a note; LookupError if no note matches."""
    try:
        row = connection.execute(
            "SELECT text FROM tbNotesLocal WHERE bookId = ? AND dateCreated = ? AND title = ?",
            (book_id, date_created, title),
        ).fetchone()
    except sqlite3.Error as exc:
        logger.debug("Query failed: %s", exc)
        raise DatabaseError(f"failed to load note: {exc}") from exc
    if row is None:
        raise LookupError("No matching note found")
    return _text(row[0])


def load_favorite_books(connection: sqlite3.Connection) -> list[FavoriteBook]:
    """The favourite books; empty if the book or favourite tables are missing."""
    tables = _table_names(connection)
    if "tbFavorites" not in tables or "tbBooks" not in tables:
        logger.debug("Load favorites/books table not found")
        return []
    try:
        rows = connection.execute(
            "SELECT id, title, author, year, image FROM tbBooks "
            "WHERE id IN (SELECT bookId FROM tbFavorites)"
        ).fetchall()
    except sqlite3.Error as exc:
        logger.debug("Book load query failed: %s", exc)
        raise DatabaseError(f"failed to load favourite books: {exc}") from exc
    return [
        FavoriteBook(_text(book_id), _text(title), _text(author), _to_int(year), _text(image))
        for book_id, title, author, year, image in rows
    ]


def load_notes(connection: sqlite3.Connection, book_id: str) -> list[Note]:
    """The book's notes, most recently modified first."""
    if NOTES_TABLE not in _table_names(connection):
        return []
    try:
        rows = connection.execute(
            "SELECT title, dateCreated FROM tbNotesLocal WHERE bookId = ? "
            "ORDER BY dateModified DESC",
            (book_id,),
        ).fetchall()
    except sqlite3.Error as exc:
        logger.debug("Note load query failed: %s", exc)
        raise DatabaseError(f"failed to load notes: {exc}") from exc
    return [Note(str(book_id), _text(title), _text(created)) for title, created in rows]


def book_label(book: FavoriteBook) -> str:
    """The caption shown under a book's cover."""
    return f"{book.title} by {book.author}"


@dataclass
class NoteEditor:
    """An open note: a new one to be stored, or an existing one to be updated."""

    connection: sqlite3.Connection
    book_id: str
    date_created: str
    title: str = ""
    text: str = ""
    is_new: bool = True
    on_saved: Callable[[str, str], None] | None = field(default=None, repr=False)

    def save(self) -> None:
        """Store the note: insert it if new, otherwise update it in place."""
        if self.is_new:
            if self.on_saved is not None:
                self.on_saved(self.title, self.text)
            save_note(self.connection, self.book_id, self.date_created, self.title, self.text)
        else:
            edit_note(self.connection, self.book_id, self.date_created, self.title, self.text)


def new_note(connection: sqlite3.Connection, book_id: str) -> NoteEditor:
    """An empty editor for a new note on the given book."""
    return NoteEditor(connection, str(book_id), timestamp(datetime.now()))


def open_note(
    connection: sqlite3.Connection, book_id: str, date_created: str, title: str
) -> NoteEditor:
    """An editor loaded with an existing note; LookupError if it does not exist."""
    text = load_note_text(connection, book_id, date_created, title)
    return NoteEditor(connection, str(book_id), date_created, title, text, is_new=False)