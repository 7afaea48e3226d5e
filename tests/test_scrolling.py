import pytest

from shelfspace.scrolling import Cursor, DragScroller, ScrollBar


def test_scrollbar_clamps():
    bar = ScrollBar(50)
    assert bar.set_value(80) == 50
    assert bar.set_value(-5) == 0
    assert bar.set_value(30) == 30
    assert bar.value == 30


def test_scrollbar_invalid_range():
    with pytest.raises(ValueError):
        ScrollBar(maximum=-1)


def test_initial_state():
    scroller = DragScroller(100, 200)
    assert scroller.dragging is False
    assert scroller.cursor is Cursor.ARROW
    assert (scroller.horizontal.value, scroller.vertical.value) == (0, 0)


def test_drag_moves_opposite_to_pointer():
    scroller = DragScroller(100, 100)
    scroller.press(50, 50)
    assert scroller.dragging is True
    assert scroller.cursor is Cursor.CLOSED_HAND
    assert scroller.move(30, 40) == (20, 10)
    assert scroller.last_pos == (30, 40)


def test_drag_is_cumulative_and_reversible():
    scroller = DragScroller(100, 100)
    scroller.press(50, 50)
    scroller.move(40, 45)
    first = scroller.move(30, 40)
    back = scroller.move(50, 50)
    assert first[0] > 0 and first[1] > 0
    assert back == (0, 0)


def test_drag_clamps_to_maximum():
    scroller = DragScroller(100, 60)
    scroller.press(500, 500)
    assert scroller.move(0, 0) == (100, 60)


def test_move_without_press_does_nothing():
    scroller = DragScroller(100, 100)
    assert scroller.move(10, 10) == (0, 0)


def test_non_left_press_does_not_drag():
    scroller = DragScroller(100, 100)
    scroller.press(50, 50, left_button=False)
    assert scroller.dragging is False
    assert scroller.move(0, 0) == (0, 0)


def test_release_stops_drag():
    scroller = DragScroller(100, 100)
    scroller.press(50, 50)
    scroller.release()
    assert scroller.dragging is False
    assert scroller.cursor is Cursor.ARROW
    assert scroller.move(0, 0) == (0, 0)