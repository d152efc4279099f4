from __future__ import annotations

import pytest

from sheet_engine.coords import Point, PointMap
from sheet_engine.grid import (
    GridValidationError,
    copied_to_text,
    create_empty_matrix,
    ensure_point,
    from_rows,
    get,
    get_size,
    has,
    inclusive_range,
    join,
    pad_matrix,
    set,
    split,
    unset,
)


def make_grid() -> tuple:
    return (("a", "b", "c"), ("d", "e", "f"))


def value_cell(raw: str) -> dict:
    return {"value": raw}


def test_get_size_derives_from_rows() -> None:
    assert get_size(make_grid()).rows == 2
    assert get_size(make_grid()).columns == 3
    assert get_size(()).columns == 0


@pytest.mark.parametrize(
    ("row", "column", "expected"),
    [(0, 0, True), (1, 2, True), (2, 0, False), (0, 3, False), (-1, 0, False)],
)
def test_has_checks_bounds(row: int, column: int, expected: bool) -> None:
    assert has(row, column, make_grid()) is expected


def test_get_outside_bounds_is_none() -> None:
    assert get(1, 1, make_grid()) == "e"
    assert get(5, 5, make_grid()) is None


def test_set_only_rebuilds_touched_row() -> None:
    grid = make_grid()

    updated = set(1, 0, "z", grid)

    assert updated[1] == ("z", "e", "f")
    assert updated[0] is grid[0]
    assert grid[1][0] == "d"


def test_unset_empties_cell() -> None:
    assert unset(0, 1, make_grid())[0] == ("a", None, "c")


def test_pad_matrix_grows_but_never_shrinks() -> None:
    padded = pad_matrix(make_grid(), 4)

    assert get_size(padded).rows == 4
    assert padded[3] == (None, None, None)
    assert pad_matrix(make_grid(), 1) == make_grid()


def test_create_empty_matrix_and_from_rows() -> None:
    assert create_empty_matrix(2, 2) == ((None, None), (None, None))
    assert from_rows([["a"], ["b", "c"]]) == (("a", None), ("b", "c"))


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (Point(0, 0), Point(0, 0)),
        (Point(1, 1), Point(3, 4)),
        (Point(3, 4), Point(1, 1)),
        (Point(0, 5), Point(2, 0)),
    ],
)
def test_inclusive_range_covers_rectangle(start: Point, end: Point) -> None:
    points = inclusive_range(start, end)

    expected = (abs(start.row - end.row) + 1) * (abs(start.column - end.column) + 1)
    assert len(points) == expected
    assert len(points) == len(frozenset(points))
    assert start in points
    assert end in points
    assert points == sorted(points)


def test_split_parses_rows_and_cells() -> None:
    grid = split("a\tb\nc\td", value_cell)

    assert grid == (
        ({"value": "a"}, {"value": "b"}),
        ({"value": "c"}, {"value": "d"}),
    )


def test_split_keeps_trailing_empty_row() -> None:
    grid = split("a\n", value_cell)

    assert grid == (({"value": "a"},), ({"value": ""},))
    assert join(grid) == "a\n"


def test_split_accepts_crlf() -> None:
    assert split("a\tb\r\nc\td", str) == (("a", "b"), ("c", "d"))


def test_split_pads_ragged_rows() -> None:
    assert split("a\nb\tc", str) == (("a", None), ("b", "c"))


def test_join_is_inverse_of_split() -> None:
    text = "1\t2\t3\nfoo\t\tbar"

    assert join(split(text, value_cell)) == text


def test_copied_to_text_anchors_at_min_point() -> None:
    copied = PointMap.from_entries(
        [
            (Point(2, 3), {"value": "x"}),
            (Point(3, 4), {"value": "y"}),
        ]
    )

    assert copied_to_text(copied) == "x\t\n\ty"
    assert copied_to_text(PointMap()) == ""


def test_ensure_point_raises_outside_grid() -> None:
    assert ensure_point(make_grid(), Point(1, 2)) == Point(1, 2)
    with pytest.raises(GridValidationError) as excinfo:
        ensure_point(make_grid(), Point(2, 0))
    assert excinfo.value.point == Point(2, 0)
