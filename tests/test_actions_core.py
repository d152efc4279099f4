from __future__ import annotations

from sheet_engine.actions import (
    activate,
    blur,
    clear,
    commit,
    drag_end,
    drag_start,
    edit,
    key_press,
    select,
    set_cell_data,
    set_cell_dimensions,
    set_data,
    view,
)
from sheet_engine.actions import KeyEvent
from sheet_engine.coords import Point, PointMap, PointSet
from sheet_engine.grid import create_empty_matrix
from sheet_engine.state import (
    AxisDimensions,
    CellDimensions,
    CommitEntry,
    StoreState,
    initial_state,
)


def make_state(rows: int = 3, columns: int = 3) -> StoreState:
    data = [
        [{"value": f"{row},{column}"} for column in range(columns)]
        for row in range(rows)
    ]
    return initial_state(data)


def with_read_only(state: StoreState, point: Point) -> StoreState:
    row = list(state.data[point.row])
    row[point.column] = {**row[point.column], "read_only": True}
    data = list(state.data)
    data[point.row] = tuple(row)
    return state.merge({"data": tuple(data)})


def dispatch(state: StoreState, action, *args) -> StoreState:
    return state.merge(action(state, *args))


def test_activate_focuses_then_edits() -> None:
    state = dispatch(make_state(), activate, Point(1, 1))

    assert state.active == Point(1, 1)
    assert state.selected == PointSet.from_points([Point(1, 1)])
    assert state.mode == "view"

    state = dispatch(state, activate, Point(1, 1))
    assert state.mode == "edit"


def test_activate_read_only_cell_twice_is_vetoed() -> None:
    state = with_read_only(make_state(), Point(0, 0))
    state = dispatch(state, activate, Point(0, 0))

    assert activate(state, Point(0, 0)) is None


def test_select_builds_rectangle_from_active() -> None:
    state = dispatch(make_state(), activate, Point(2, 2))

    state = dispatch(state, select, Point(1, 0))

    assert state.selected.to_list() == [
        Point(1, 0),
        Point(1, 1),
        Point(1, 2),
        Point(2, 0),
        Point(2, 1),
        Point(2, 2),
    ]
    assert state.active == Point(2, 2)


def test_select_same_or_without_active_is_noop() -> None:
    state = make_state()
    assert select(state, Point(0, 0)) is None

    state = dispatch(state, activate, Point(0, 0))
    assert select(state, Point(0, 0)) is None


def test_edit_and_view_transitions() -> None:
    state = dispatch(make_state(), activate, Point(0, 0))

    assert edit(state) == {"mode": "edit"}
    assert view(state) == {"mode": "view"}
    assert edit(make_state()) is None


def test_edit_read_only_is_vetoed() -> None:
    state = dispatch(with_read_only(make_state(), Point(0, 0)), activate, Point(0, 0))

    assert edit(state) is None


def test_blur_clears_active_only() -> None:
    state = dispatch(make_state(), activate, Point(0, 1))

    state = dispatch(state, blur)

    assert state.active is None
    assert state.selected == PointSet.from_points([Point(0, 1)])


def test_set_cell_data_writes_and_records_bindings() -> None:
    state = dispatch(make_state(), activate, Point(0, 0))

    state = dispatch(
        state, set_cell_data, Point(0, 0), {"value": "=B1"}, [Point(0, 1)]
    )

    assert state.data[0][0] == {"value": "=B1"}
    assert state.last_changed == Point(0, 0)
    assert state.mode == "edit"
    assert state.bindings.get(Point(0, 0)) == PointSet.from_points([Point(0, 1)])


def test_set_cell_data_on_read_only_is_vetoed() -> None:
    state = dispatch(with_read_only(make_state(), Point(0, 0)), activate, Point(0, 0))

    assert set_cell_data(state, Point(0, 0), {"value": "x"}, []) is None


def test_clear_keeps_attributes_and_logs_changes() -> None:
    state = make_state(2, 2)
    state = state.merge(
        {"data": (({"value": "a", "style": "bold"}, {"value": "b"}),) + state.data[1:]}
    )
    state = dispatch(state, activate, Point(0, 0))
    state = dispatch(state, select, Point(0, 1))

    state = dispatch(state, clear)

    assert state.data[0][0] == {"value": "", "style": "bold"}
    assert state.data[0][1] == {"value": ""}
    assert state.last_commit == (
        CommitEntry(
            {"value": "a", "style": "bold"},
            {"value": "", "style": "bold"},
            Point(0, 0),
        ),
        CommitEntry({"value": "b"}, {"value": ""}, Point(0, 1)),
    )


def test_clear_without_active_or_read_only_is_noop() -> None:
    assert clear(make_state()) is None

    state = dispatch(with_read_only(make_state(), Point(1, 1)), activate, Point(1, 1))
    assert clear(state) is None


def test_key_press_starts_editing() -> None:
    state = dispatch(make_state(), activate, Point(0, 0))

    assert key_press(state, KeyEvent(key="a")) == {"mode": "edit"}
    assert key_press(state, KeyEvent(key="c", meta=True)) is None
    assert key_press(state.merge({"mode": "edit"}), KeyEvent(key="a")) is None
    assert key_press(make_state(), KeyEvent(key="a")) is None


def test_key_press_on_read_only_is_vetoed() -> None:
    state = dispatch(with_read_only(make_state(), Point(0, 0)), activate, Point(0, 0))

    assert key_press(state, KeyEvent(key="a")) is None


def test_set_cell_dimensions_skips_unchanged() -> None:
    dimensions = CellDimensions(top=10, left=20, height=30, width=40)
    state = dispatch(make_state(), set_cell_dimensions, Point(1, 2), dimensions)

    assert state.row_dimensions[1] == AxisDimensions(offset=10, size=30)
    assert state.column_dimensions[2] == AxisDimensions(offset=20, size=40)
    assert set_cell_dimensions(state, Point(1, 2), dimensions) is None
    assert (
        set_cell_dimensions(
            state, Point(1, 2), CellDimensions(top=10, left=20, height=31, width=40)
        )
        is not None
    )


def test_set_data_prunes_out_of_bounds_references() -> None:
    state = dispatch(make_state(3, 3), activate, Point(2, 2))
    state = dispatch(state, select, Point(0, 0))
    state = state.merge(
        {
            "bindings": PointMap.from_entries(
                [
                    (Point(0, 0), PointSet.from_points([Point(0, 1), Point(2, 2)])),
                    (Point(2, 1), PointSet.from_points([Point(0, 0)])),
                ]
            )
        }
    )

    state = dispatch(state, set_data, create_empty_matrix(2, 2))

    assert state.active is None
    assert state.selected.to_list() == [
        Point(0, 0),
        Point(0, 1),
        Point(1, 0),
        Point(1, 1),
    ]
    assert list(state.bindings) == [
        (Point(0, 0), PointSet.from_points([Point(0, 1)]))
    ]


def test_set_data_keeps_active_in_bounds() -> None:
    state = dispatch(make_state(3, 3), activate, Point(1, 1))

    state = dispatch(state, set_data, create_empty_matrix(4, 4))

    assert state.active == Point(1, 1)
    assert len(state.data) == 4


def test_drag_and_commit() -> None:
    state = dispatch(make_state(), drag_start)
    assert state.dragging is True
    assert dispatch(state, drag_end).dragging is False

    changes = [CommitEntry({"value": "a"}, {"value": "b"})]
    assert commit(state, changes) == {"last_commit": tuple(changes)}
