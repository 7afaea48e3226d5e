"""Shared SQLite connection handling for the library database."""

from __future__ import annotations

import logging
import sqlite3
from os import PathLike

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Raised when the library database cannot be opened or queried."""


class DatabaseManager:
    """Holds the one SQLite connection the application works with."""

    def __init__(self) -> None:
        self._connection: sqlite3.Connection | None = None
        self._path: str | None = None

    def open_database(self, path: str | PathLike[str]) -> bool:
        """Open the database at *path*; an already open database is kept."""
        if self._connection is not None:
            return True
        try:
            connection = sqlite3.connect(str(path), isolation_level=None)
        except sqlite3.Error as exc:
            logger.debug("Error opening database: %s", exc)
            raise DatabaseError(f"cannot open database {path!s}: {exc}") from exc
        self._connection = connection
        self._path = str(path)
        logger.debug("Database connected: %s", path)
        return True

    def is_open(self) -> bool:
        return self._connection is not None

    def connection(self) -> sqlite3.Connection:
        """Return the open connection."""
        if self._connection is None:
            raise DatabaseError("database is not open")
        return self._connection

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            self._path = None

    def tables(self) -> list[str]:
        """Names of the user tables in the open database."""
        rows = self.connection().execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
        )
        return [name for (name,) in rows if not name.startswith("sqlite_")]


_manager = DatabaseManager()


def get_manager() -> DatabaseManager:
    """Return the application-wide database manager."""
    return _manager


def enable_wal(connection: sqlite3.Connection) -> str:
    """Switch the connection to write-ahead logging and return the journal mode."""
    try:
        (mode,) = connection.execute("PRAGMA journal_mode=WAL;").fetchone()
    except sqlite3.Error as exc:
        logger.debug("Failed to enable WAL mode: %s", exc)
        raise DatabaseError(f"failed to enable WAL mode: {exc}") from exc
    logger.debug("WAL mode status: %s", mode)
    return str(mode)