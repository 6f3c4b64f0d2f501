"""Tests for gridcursor.builder: cursor movement and grid writes."""

import pytest

from gridcursor import (
    CursorBoundsError,
    TaggedValue,
    Vector,
    derive_label,
    new_table_builder,
)


def _values(tb) -> list[list]:
    return [[c.value for c in row] for row in tb.table.rows]


# ===========================================================================
# Cursor
# ===========================================================================


class TestNewTableBuilder:
    """A fresh builder sits at (1, 1) on a single blank cell."""

    def test_empty_builder(self, tb, row_node, col_node):
        assert (tb.nrow, tb.ncol) == (1, 1)
        assert tb.table.nrows == 1
        assert tb.table.width(1) == 1
        assert tb.table.get(1, 1).is_blank
        assert tb.row is row_node
        assert tb.col is col_node
        assert tb.table.row_header is None
        assert tb.table.col_header is None


class TestCursorMovement:
    """Relative and absolute cursor moves, and their bounds."""

    @pytest.mark.parametrize("r,c", [(1, 1), (3, 7), (100, 2)])
    def test_cursor_pos(self, tb, r, c):
        moved = tb.cursor_pos(r, c)
        assert (moved.nrow, moved.ncol) == (r, c)

    @pytest.mark.parametrize("r,c", [(0, 1), (1, 0), (-2, 3), (0, 0)])
    def test_cursor_pos_rejects_non_positive(self, tb, r, c):
        with pytest.raises(CursorBoundsError):
            tb.cursor_pos(r, c)

    def test_home(self, tb):
        moved = tb.cursor_pos(4, 9).home()
        assert (moved.nrow, moved.ncol) == (1, 1)

    def test_up_and_down(self, tb):
        moved = tb.cursor_pos(3, 3).cursor_up(2)
        assert moved.nrow == 1
        assert moved.cursor_down(4).nrow == 5
        assert moved.cursor_down().nrow == 2

    def test_left_and_right(self, tb):
        moved = tb.cursor_pos(3, 3).cursor_left(2)
        assert moved.ncol == 1
        assert moved.cursor_right().ncol == 2

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_right_then_left_round_trip(self, tb, n):
        start = tb.cursor_pos(2, 4)
        assert start.cursor_right(n).cursor_left(n).ncol == 4

    def test_cursor_up_past_top(self, tb):
        with pytest.raises(CursorBoundsError, match="cursor_up") as exc:
            tb.cursor_up()
        assert exc.value.operation == "cursor_up"
        assert exc.value.nrow == 0
        assert exc.value.ncol == 1

    def test_cursor_left_past_edge(self, tb):
        with pytest.raises(CursorBoundsError, match="cursor_left"):
            tb.cursor_pos(2, 2).cursor_left(2)

    def test_negative_down_and_right(self, tb):
        with pytest.raises(CursorBoundsError):
            tb.cursor_down(-1)
        with pytest.raises(CursorBoundsError):
            tb.cursor_right(-1)

    def test_bounds_error_is_value_error(self, tb):
        with pytest.raises(ValueError):
            tb.cursor_up(3)

    def test_carriage_return(self, tb):
        moved = tb.cursor_pos(3, 5).carriage_return()
        assert (moved.nrow, moved.ncol) == (3, 1)

    def test_line_feed(self, tb):
        moved = tb.cursor_pos(3, 5).line_feed()
        assert (moved.nrow, moved.ncol) == (4, 5)
        assert tb.line_feed(3).nrow == 4

    @pytest.mark.parametrize("r,c", [(1, 1), (2, 6), (5, 1)])
    def test_new_line_is_return_then_feed(self, tb, r, c):
        start = tb.cursor_pos(r, c)
        a = start.new_line()
        b = start.carriage_return().line_feed()
        assert (a.nrow, a.ncol) == (b.nrow, b.ncol) == (r + 1, 1)

    def test_moves_do_not_mutate(self, tb):
        tb.cursor_pos(4, 4)
        assert (tb.nrow, tb.ncol) == (1, 1)


class TestNewRowAndCol:
    """Opening a new row or column from the current table extent."""

    def test_new_row_on_fresh_table(self, tb):
        moved = tb.cursor_pos(1, 3).new_row()
        assert (moved.nrow, moved.ncol) == (2, 1)

    def test_new_row_after_writes(self, tb):
        filled = tb.add_row("a", "b", "c")
        moved = filled.cursor_pos(2, 2).new_row()
        assert (moved.nrow, moved.ncol) == (4, 1)

    def test_new_col_uses_first_row_width(self, tb):
        filled = tb.add_col("a", "b").new_line().add_col("c", "d", "e", "f")
        moved = filled.new_col()
        assert (moved.nrow, moved.ncol) == (1, 3)


# ===========================================================================
# Writing
# ===========================================================================


class TestWriteCell:
    """Single-cell writes, provenance and on-demand growth."""

    def test_write_at_home(self, tb, row_node, col_node):
        written = tb.write_cell(23)
        c = written.table.get(1, 1)
        assert c.value == 23
        assert c.row is row_node
        assert c.col is col_node
        assert (written.nrow, written.ncol) == (1, 1)

    def test_traceability_indices(self, tb):
        c = tb.write_cell("x", subrow=2, subcol="m").table.get(1, 1)
        assert (c.subrow, c.subcol) == (2, "m")

    def test_overwrite(self, tb):
        assert _values(tb.write_cell("a").write_cell("b")) == [["b"]]

    def test_original_builder_untouched(self, tb):
        tb.write_cell("a")
        assert tb.table.get(1, 1).is_blank

    def test_next_row_grows_by_one(self, tb):
        written = tb.cursor_down().write_cell("x")
        assert written.table.nrows == 2
        assert _values(written) == [[None], ["x"]]

    def test_far_row_appends_only_needed_rows(self, tb):
        written = tb.cursor_pos(4, 1).write_cell("x")
        assert written.table.nrows == 4
        assert written.table.rows[1] == ()
        assert written.table.rows[2] == ()

    def test_column_beyond_width_is_padded(self, tb):
        written = tb.cursor_pos(1, 3).write_cell("x")
        assert _values(written) == [[None, None, "x"]]

    def test_write_label(self, tb, col_node):
        label = tb.write_cell(derive_label(col_node)).table.get(1, 1).value
        assert (label.text, label.units) == ("Age", "years")


class TestAddRowAndCol:
    """Bulk writes down a column or across a row."""

    def test_add_row(self, tb):
        start = tb.cursor_pos(2, 2)
        built = start.add_row("A", "B", "C")
        assert built.table.get(2, 2).value == "A"
        assert built.table.get(3, 2).value == "B"
        assert built.table.get(4, 2).value == "C"
        assert (built.nrow, built.ncol) == (5, 2)

    def test_add_col(self, tb):
        built = tb.add_col("A", "B", "C")
        assert _values(built) == [["A", "B", "C"]]
        assert (built.nrow, built.ncol) == (1, 4)

    def test_add_col_flattens(self, tb):
        built = tb.add_col("n", Vector.n([1, 2], name="count"), ["x"])
        row = built.table.rows[0]
        assert [c.value for c in row] == [
            "n",
            TaggedValue(1, kind="N", name="count"),
            TaggedValue(2, kind="N", name="count"),
            "x",
        ]

    def test_add_row_passes_traceability(self, tb):
        built = tb.add_row(1, 2, subrow="lvl", subcol=3)
        assert {(c.subrow, c.subcol) for row in built.table.rows for c in row} == {("lvl", 3)}

    def test_add_nothing(self, tb):
        assert tb.add_col() == tb
        assert tb.add_row([]) == tb

    def test_chained_layout(self, tb):
        built = (
            tb.add_col("", "Male", "Female")
            .new_line()
            .add_col("Age", 41, 38)
            .new_line()
            .add_col("Weight", 80, 65)
        )
        assert _values(built) == [
            ["", "Male", "Female"],
            ["Age", 41, 38],
            ["Weight", 80, 65],
        ]
        assert (built.nrow, built.ncol) == (3, 4)


class TestApply:
    """Folding a function over items."""

    def test_folds_over_items(self, tb):
        built = tb.apply(range(1, 4), lambda b, x: b.write_cell(x * 10).cursor_right())
        assert _values(built) == [[10, 20, 30]]
        assert built.ncol == 4

    def test_extra_arguments(self, tb):
        def put(b, x, scale, subrow=None):
            return b.write_cell(x * scale, subrow=subrow).cursor_down()

        built = tb.apply([1, 2], put, 3, subrow="s")
        assert _values(built) == [[3], [6]]
        assert built.table.get(2, 1).subrow == "s"

    def test_empty(self, tb):
        assert tb.apply([], lambda b, x: b.cursor_right()) is tb

    def test_error_propagates(self, tb):
        with pytest.raises(CursorBoundsError):
            tb.apply([1], lambda b, x: b.cursor_up())


class TestRelativeLayout:
    """Subtrees laid out from saved cursor positions."""

    def test_subtrees_written_from_saved_cursor(self, row_node, col_node):
        """Two subtrees laid out from saved positions fill the grid regardless of order."""

        def subtree(b, label):
            return b.add_col(label, 1).new_line().carriage_return()

        base = new_table_builder(row_node, col_node)
        left_first = subtree(subtree(base, "L").cursor_pos(1, 3), "R")
        right_first = subtree(subtree(base.cursor_pos(1, 3), "R").home(), "L")
        assert _values(left_first) == _values(right_first) == [["L", 1, "R", 1]]
