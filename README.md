# shelfspace

A small personal book shelf backed by a SQLite database. It reads a catalogue
of books, lets you mark favourites, write dated reviews and keep notes per book.

The database is expected to hold the tables `tbBooks`, `tbFavorites` and
`tbReviews`. A `tbNotesLocal` table for notes is created the first time a note
is saved.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
shelfspace --help
```

The command opens `ShelfSpace.db` in the current directory (change it with
`--database PATH`), switches the database to write-ahead logging and runs one
of these actions. With no action it runs `home`.

- `home`: list every book with its favourite star (★ or ☆).
- `search TEXT`: list books whose title, author, genre or year contains TEXT, ignoring case.
- `favorite BOOK_ID`: add the book to the favourites, or remove it if it is already there.
- `collection [--search TEXT]`: show the favourites collection, ordered by title, optionally filtered.
- `remove FAVORITE_ID [--yes]`: remove an entry from the collection, asking first unless `--yes` is given.
- `info BOOK_ID`: show a book's title, author, year, genre, favourite star, description and reviews, newest first.
- `review BOOK_ID TEXT`: store a review; blank text is refused.
- `notes`: list every favourite book with the creation date and title of its notes.
- `note-add BOOK_ID [--title T] [--text T]`: store a new note and print its creation timestamp. A note without a title is called `Note dd/mm` after today's date.
- `note-show BOOK_ID DATE_CREATED TITLE`: print a note's text.
- `note-edit BOOK_ID DATE_CREATED TITLE [--new-title T] [--text T]`: change a note's title or text.

The exit status is 0 on success, 1 when a book, note or entry is not found or a
query fails, and -1 when the database cannot be opened.

## Library use

```python
from shelfspace.database import get_manager, enable_wal
from shelfspace.catalog import filter_books, set_favorite
from shelfspace.details import load_book_details, submit_review
from shelfspace.notes import new_note, load_notes

manager = get_manager()
manager.open_database("ShelfSpace.db")
conn = manager.connection()
enable_wal(conn)

for book in filter_books(conn, "tolkien"):
    print(book.title, book.author)

set_favorite(conn, "1", True)
submit_review(conn, "1", "A fine read.")

editor = new_note(conn, "1")
editor.title = "First impressions"
editor.text = "Slow start, great ending."
editor.save()
print(load_notes(conn, "1"))
```

Failed queries raise `shelfspace.database.DatabaseError`; a book or note that
does not exist raises `LookupError`.

Modules:

- `shelfspace.database`: the shared database connection (`DatabaseManager`, `get_manager`, `enable_wal`, `DatabaseError`).
- `shelfspace.catalog`: list and search all books (`BookSummary`, `load_all_books`, `filter_books`) and mark favourites (`is_book_favorite`, `add_to_favorites`, `remove_from_favorites`, `set_favorite`, `favorite_mark`, `render_title_author`).
- `shelfspace.collection`: the favourites collection with search and removal (`CollectionView`, `FavoriteEntry`, `matches_filter`).
- `shelfspace.details`: one book's details, its favourite star and its reviews (`BookDetails`, `Review`, `load_book_details`, `load_reviews`, `toggle_favorite`, `submit_review`, `render_review`, `parse_review_date`, `format_review_date`).
- `shelfspace.notes`: per-book notes (`NoteEditor`, `new_note`, `open_note`, `save_note`, `edit_note`, `load_note_text`, `load_notes`, `load_favorite_books`).
- `shelfspace.scrolling`: press-and-drag panning over clamped scroll bars (`DragScroller`, `ScrollBar`, `Cursor`).

## What it does not do

- There is no graphical window; the package offers the command line and the library functions above. `shelfspace.scrolling` models drag panning but draws nothing.
- Cover images are not downloaded or shown; image URLs are only read from the catalogue.
- It does not create or fill `tbBooks`, `tbFavorites` or `tbReviews`, and it has no command for adding books to the catalogue.