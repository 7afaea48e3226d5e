"""Command-line front end for browsing books, favourites, reviews and notes."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from collections.abc import Sequence

from shelfspace.catalog import filter_books, is_book_favorite, load_all_books, favorite_mark
from shelfspace.collection import CollectionView
from shelfspace.database import DatabaseError, enable_wal, get_manager
from shelfspace.details import (
    format_review_date,
    load_book_details,
    load_reviews,
    submit_review,
    toggle_favorite,
)
from shelfspace.notes import (
    book_label,
    load_favorite_books,
    load_notes,
    new_note,
    open_note,
)

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "ShelfSpace.db"


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the shelfspace command."""
    parser = argparse.ArgumentParser(
        prog="shelfspace", description="Browse and manage a personal book shelf."
    )
    parser.add_argument(
        "--database",
        default=DEFAULT_DATABASE,
        help="path of the SQLite library database (default: %(default)s)",
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("home", help="list every book in the catalogue")

    search = commands.add_parser("search", help="search books by title, author, year or genre")
    search.add_argument("text")

    favorite = commands.add_parser("favorite", help="add or remove a book from favourites")
    favorite.add_argument("book_id")

    collection = commands.add_parser("collection", help="show the favourites collection")
    collection.add_argument("--search", default="", help="filter the collection")

    remove = commands.add_parser("remove", help="remove an entry from the collection")
    remove.add_argument("favorite_id")
    remove.add_argument("--yes", action="store_true", help="do not ask for confirmation")

    info = commands.add_parser("info", help="show a book's details and reviews")
    info.add_argument("book_id")

    review = commands.add_parser("review", help="write a review of a book")
    review.add_argument("book_id")
    review.add_argument("text")

    commands.add_parser("notes", help="list the notes of every favourite book")

    note_add = commands.add_parser("note-add", help="write a new note on a book")
    note_add.add_argument("book_id")
    note_add.add_argument("--title", default="")
    note_add.add_argument("--text", default="")

    note_show = commands.add_parser("note-show", help="print a note")
    note_show.add_argument("book_id")
    note_show.add_argument("date_created")
    note_show.add_argument("title")

    note_edit = commands.add_parser("note-edit", help="change a note")
    note_edit.add_argument("book_id")
    note_edit.add_argument("date_created")
    note_edit.add_argument("title")
    note_edit.add_argument("--new-title", dest="new_title")
    note_edit.add_argument("--text")

    return parser


def _print_books(connection: sqlite3.Connection, books) -> None:
    if not books:
        print("No books found.")
        return
    for book in books:
        mark = favorite_mark(is_book_favorite(connection, book.book_id))
        print(f"{mark} {book.book_id}: {book.title} by {book.author}")


def _confirm(question: str) -> bool:
    answer = input(f"{question} [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


def _run(args: argparse.Namespace, connection: sqlite3.Connection) -> int:
    command = args.command or "home"

    if command == "home":
        _print_books(connection, load_all_books(connection))
    elif command == "search":
        _print_books(connection, filter_books(connection, args.text))
    elif command == "favorite":
        print(f"{toggle_favorite(connection, args.book_id)} {args.book_id}")
    elif command == "collection":
        view = CollectionView(connection)
        for entry in view.set_search_text(args.search):
            print(
                f"{entry.favorite_id}\t{entry.title}\t{entry.author}"
                f"\t{entry.genre}\t{entry.year}"
            )
    elif command == "remove":
        view = CollectionView(connection)
        entry = next(
            (item for item in view.entries if item.favorite_id == args.favorite_id), None
        )
        if entry is None:
            print("No book selected.", file=sys.stderr)
            return 1
        if not args.yes and not _confirm(view.confirmation_prompt(entry)):
            return 0
        view.remove(entry.favorite_id)
        print(f"Removed {entry.title}")
    elif command == "info":
        details = load_book_details(connection, args.book_id)
        print(details.title)
        print(f"Author: {details.author}")
        print(f"Year: {details.year}")
        print(f"Genre: {details.genre}")
        print(f"Favorite: {favorite_mark(is_book_favorite(connection, args.book_id))}")
        if details.description:
            print()
            print(details.description)
        reviews = load_reviews(connection, args.book_id)
        if reviews:
            print()
            for review in reviews:
                print(f"[{format_review_date(review.created)}] {review.text}")
    elif command == "review":
        review = submit_review(connection, args.book_id, args.text)
        if review is None:
            print("Review text is empty.", file=sys.stderr)
            return 1
        print(f"[{format_review_date(review.created)}] {review.text}")
    elif command == "notes":
        for book in load_favorite_books(connection):
            print(book_label(book))
            for note in load_notes(connection, book.book_id):
                print(f"  {note.date_created}  {note.title}")
    elif command == "note-add":
        editor = new_note(connection, args.book_id)
        editor.title = args.title
        editor.text = args.text
        editor.save()
        print(editor.date_created)
    elif command == "note-show":
        editor = open_note(connection, args.book_id, args.date_created, args.title)
        print(editor.text)
    elif command == "note-edit":
        editor = open_note(connection, args.book_id, args.date_created, args.title)
        if args.new_title is not None:
            editor.title = args.new_title
        if args.text is not None:
            editor.text = args.text
        editor.save()
        print(editor.title)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = build_parser().parse_args(argv)
    manager = get_manager()
    was_open = manager.is_open()
    try:
        manager.open_database(args.database)
    except DatabaseError as exc:
        print(f"Failed to open database, exiting: {exc}", file=sys.stderr)
        return -1
    try:
        connection = manager.connection()
        try:
            enable_wal(connection)
        except DatabaseError as exc:
            logger.debug("%s", exc)
        try:
            return _run(args, connection)
        except (DatabaseError, LookupError) as exc:
            print(str(exc), file=sys.stderr)
            return 1
    finally:
        if not was_open:
            manager.close()


if __name__ == "__main__":
    sys.exit(main())