import sqlite3
from unittest import mock

import pytest

from shelfspace.cli import build_parser, main
from shelfspace.database import get_manager


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "library.db"
    connection = sqlite3.connect(path)
    connection.executescript(
        """
        CREATE TABLE tbBooks (
            id INTEGER PRIMARY KEY, title TEXT, author TEXT, genre TEXT,
            year INTEGER, image TEXT, description TEXT
        );
        CREATE TABLE tbFavorites (id INTEGER PRIMARY KEY AUTOINCREMENT, bookId INTEGER);
        CREATE TABLE tbReviews (
            id INTEGER PRIMARY KEY AUTOINCREMENT, bookId INTEGER, text TEXT, dateCreated TEXT
        );
        INSERT INTO tbBooks VALUES
            (1, 'The Hobbit', 'J. R. R. Tolkien', 'Fantasy', 1937, 'http://localhost/h.png', 'A journey.'),
            (2, 'Dune', 'Frank Herbert', 'Science Fiction', 1965, 'http://localhost/d.png', 'Spice.');
        """
    )
    connection.commit()
    connection.close()
    return path


def _query(path, sql, params=()):
    connection = sqlite3.connect(path)
    try:
        return connection.execute(sql, params).fetchall()
    finally:
        connection.close()


def _run(db_path, *args):
    return main(["--database", str(db_path), *args])


def test_parser_default_database():
    args = build_parser().parse_args([])
    assert args.database == "ShelfSpace.db"
    assert args.command is None


def test_unopenable_database_exits_with_minus_one(tmp_path, capsys):
    missing = tmp_path / "missing" / "library.db"
    assert main(["--database", str(missing)]) == -1
    assert "Failed to open database" in capsys.readouterr().err


def test_manager_closed_after_run(db_path):
    assert _run(db_path, "home") == 0
    assert get_manager().is_open() is False


def test_home_lists_all_books(db_path, capsys):
    assert _run(db_path, "home") == 0
    out = capsys.readouterr().out
    assert "The Hobbit by J. R. R. Tolkien" in out
    assert "Dune by Frank Herbert" in out


def test_default_command_is_home(db_path, capsys):
    assert _run(db_path) == 0
    out = capsys.readouterr().out
    assert "The Hobbit" in out and "Dune" in out


def test_search_filters_case_insensitively(db_path, capsys):
    assert _run(db_path, "search", "TOLKIEN") == 0
    out = capsys.readouterr().out
    assert "The Hobbit" in out
    assert "Dune" not in out


def test_favorite_toggles(db_path, capsys):
    assert _run(db_path, "favorite", "1") == 0
    assert "★ 1" in capsys.readouterr().out
    assert _query(db_path, "SELECT bookId FROM tbFavorites") == [(1,)]

    assert _run(db_path, "favorite", "1") == 0
    assert "☆ 1" in capsys.readouterr().out
    assert _query(db_path, "SELECT bookId FROM tbFavorites") == []


def test_home_marks_favorites(db_path, capsys):
    _run(db_path, "favorite", "2")
    capsys.readouterr()
    _run(db_path, "home")
    lines = capsys.readouterr().out.splitlines()
    assert any(line.startswith("★") and "Dune" in line for line in lines)
    assert any(line.startswith("☆") and "The Hobbit" in line for line in lines)


def test_collection_shows_favorites_with_search(db_path, capsys):
    _run(db_path, "favorite", "1")
    _run(db_path, "favorite", "2")
    capsys.readouterr()

    assert _run(db_path, "collection") == 0
    out = capsys.readouterr().out
    assert "The Hobbit" in out and "Dune" in out

    assert _run(db_path, "collection", "--search", "herbert") == 0
    out = capsys.readouterr().out
    assert "Dune" in out
    assert "The Hobbit" not in out


def test_remove_with_yes_deletes(db_path, capsys):
    _run(db_path, "favorite", "1")
    (favorite_id,) = _query(db_path, "SELECT id FROM tbFavorites")[0]
    assert _run(db_path, "remove", str(favorite_id), "--yes") == 0
    assert _query(db_path, "SELECT id FROM tbFavorites") == []


def test_remove_declined_keeps_entry(db_path):
    _run(db_path, "favorite", "1")
    (favorite_id,) = _query(db_path, "SELECT id FROM tbFavorites")[0]
    with mock.patch("builtins.input", return_value="n") as prompt:
        assert _run(db_path, "remove", str(favorite_id)) == 0
    assert "The Hobbit" in prompt.call_args.args[0]
    assert _query(db_path, "SELECT id FROM tbFavorites") == [(favorite_id,)]


def test_remove_unknown_entry_fails(db_path, capsys):
    assert _run(db_path, "remove", "42", "--yes") == 1
    assert "No book selected." in capsys.readouterr().err


def test_info_shows_details_and_reviews(db_path, capsys):
    assert _run(db_path, "review", "2", "  Great world building  ") == 0
    capsys.readouterr()
    assert _run(db_path, "info", "2") == 0
    out = capsys.readouterr().out
    assert "Dune" in out
    assert "Frank Herbert" in out
    assert "1965" in out
    assert "Great world building" in out


def test_info_unknown_book_fails(db_path):
    assert _run(db_path, "info", "99") == 1


def test_review_stores_trimmed_text(db_path):
    assert _run(db_path, "review", "1", "  Lovely  ") == 0
    assert _query(db_path, "SELECT bookId, text FROM tbReviews") == [(1, "Lovely")]


def test_blank_review_is_rejected(db_path):
    assert _run(db_path, "review", "1", "   ") == 1
    assert _query(db_path, "SELECT * FROM tbReviews") == []


def test_note_add_show_edit_and_list(db_path, capsys):
    _run(db_path, "favorite", "1")
    capsys.readouterr()

    assert _run(db_path, "note-add", "1", "--title", "Thoughts", "--text", "Dragons") == 0
    date_created = capsys.readouterr().out.strip()
    assert _query(db_path, "SELECT dateCreated FROM tbNotesLocal") == [(date_created,)]

    assert _run(db_path, "notes") == 0
    out = capsys.readouterr().out
    assert "The Hobbit by J. R. R. Tolkien" in out
    assert "Thoughts" in out

    assert _run(db_path, "note-show", "1", date_created, "Thoughts") == 0
    assert capsys.readouterr().out.strip() == "Dragons"

    assert _run(
        db_path, "note-edit", "1", date_created, "Thoughts",
        "--new-title", "Revised", "--text", "Smaug",
    ) == 0
    assert _query(db_path, "SELECT title, text FROM tbNotesLocal") == [("Revised", "Smaug")]


def test_note_show_missing_fails(db_path):
    _run(db_path, "note-add", "1", "--title", "Only", "--text", "x")
    assert _run(db_path, "note-show", "1", "never", "Only") == 1