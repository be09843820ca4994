"""Tests for cursor movement."""

import random

import pytest

from cedit.cli.core.input import Key, KeyEvent
from cedit.cli.core.navigation import CursorPosition, MOVEMENT_KEYS, move_cursor
from cedit.cli.core.terminal import ViewportGeometry

GEOMETRY = ViewportGeometry(rows=24, cols=80)


class TestSingleSteps:

    def test_arrows_move_one_cell(self) -> None:
        start = CursorPosition(10, 5)
        assert move_cursor(Key.ARROW_LEFT, start, GEOMETRY) == CursorPosition(9, 5)
        assert move_cursor(Key.ARROW_RIGHT, start, GEOMETRY) == CursorPosition(11, 5)
        assert move_cursor(Key.ARROW_UP, start, GEOMETRY) == CursorPosition(10, 4)
        assert move_cursor(Key.ARROW_DOWN, start, GEOMETRY) == CursorPosition(10, 6)

    def test_accepts_key_events(self) -> None:
        event = KeyEvent(key=Key.ARROW_RIGHT, raw=b"\x1b[C")
        assert move_cursor(event, CursorPosition(), GEOMETRY) == CursorPosition(1, 0)

    def test_stops_at_top_left(self) -> None:
        origin = CursorPosition(0, 0)
        assert move_cursor(Key.ARROW_LEFT, origin, GEOMETRY) == origin
        assert move_cursor(Key.ARROW_UP, origin, GEOMETRY) == origin

    def test_stops_at_bottom_right(self) -> None:
        corner = CursorPosition(79, 23)
        assert move_cursor(Key.ARROW_RIGHT, corner, GEOMETRY) == corner
        assert move_cursor(Key.ARROW_DOWN, corner, GEOMETRY) == corner

    def test_home_and_end(self) -> None:
        start = CursorPosition(40, 7)
        assert move_cursor(Key.HOME, start, GEOMETRY) == CursorPosition(0, 7)
        assert move_cursor(Key.END, start, GEOMETRY) == CursorPosition(79, 7)


class TestPaging:
    """Paging steps the cursor, there is no scroll offset to change."""

    def test_page_down_reaches_bottom(self) -> None:
        assert move_cursor(Key.PAGE_DOWN, CursorPosition(3, 0), GEOMETRY) == CursorPosition(3, 23)

    def test_page_up_reaches_top(self) -> None:
        assert move_cursor(Key.PAGE_UP, CursorPosition(3, 20), GEOMETRY) == CursorPosition(3, 0)

    def test_page_keeps_column(self) -> None:
        assert move_cursor(Key.PAGE_DOWN, CursorPosition(50, 4), GEOMETRY).x == 50

    def test_single_row_viewport(self) -> None:
        flat = ViewportGeometry(rows=1, cols=10)
        assert move_cursor(Key.PAGE_DOWN, CursorPosition(2, 0), flat) == CursorPosition(2, 0)


class TestNoOps:

    @pytest.mark.parametrize("event", [
        KeyEvent(key=Key.DELETE),
        KeyEvent(key=Key.ESCAPE),
        KeyEvent(key=Key.QUIT),
        KeyEvent(code=ord("j")),
    ])
    def test_non_movement_keys(self, event) -> None:
        start = CursorPosition(5, 5)
        assert move_cursor(event, start, GEOMETRY) == start

    def test_movement_key_set(self) -> None:
        assert Key.DELETE not in MOVEMENT_KEYS
        assert Key.PAGE_DOWN in MOVEMENT_KEYS


class TestClamping:

    @pytest.mark.parametrize("rows, cols", [(1, 1), (2, 3), (24, 80), (5, 200)])
    def test_cursor_stays_in_viewport(self, rows, cols) -> None:
        geometry = ViewportGeometry(rows=rows, cols=cols)
        rng = random.Random(rows * 1000 + cols)
        keys = sorted(MOVEMENT_KEYS, key=lambda k: k.name) + [Key.DELETE]

        cursor = CursorPosition()
        for _ in range(500):
            cursor = move_cursor(rng.choice(keys), cursor, geometry)
            assert 0 <= cursor.x < cols
            assert 0 <= cursor.y < rows
