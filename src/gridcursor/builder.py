"""Cursor-addressed table builder, loosely based on a VT100 terminal.

A :class:`TableBuilder` holds a cursor position, the table under construction
and the row/column AST nodes the table is anchored to (for traceability when
generating indexes). Every operation returns a new builder, so construction
reads as a chain::

    tb = (
        new_table_builder(row_node, col_node)
        .col_header("Age", "Weight")
        .add_col(derive_label(row_node), Vector.n([23, 41]))
        .new_line()
        .add_col("total", 64)
    )
    tb.table  # finished CellTable, headers included

Cursor coordinates are 1-based and must stay positive; a move that would put
either coordinate at 0 or below raises :class:`CursorBoundsError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable

from gridcursor.cells import Axis, CellRole, CellTable, cell, cell_table
from gridcursor.errors import CursorBoundsError
from gridcursor.flatten import args_flatten

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableBuilder:
    """Immutable builder state: cursor, table and AST anchors."""

    nrow: int
    ncol: int
    table: CellTable
    row: Any = None
    col: Any = None

    # ─── Cursor movement ─────────────────────────────────────────────────

    def _moved(self, operation: str, nrow: int, ncol: int) -> TableBuilder:
        if nrow <= 0 or ncol <= 0:
            raise CursorBoundsError(
                f"{operation} beyond available cells (row={nrow}, col={ncol})",
                operation=operation,
                nrow=nrow,
                ncol=ncol,
            )
        return replace(self, nrow=nrow, ncol=ncol)

    def home(self) -> TableBuilder:
        return replace(self, nrow=1, ncol=1)

    def cursor_up(self, n: int = 1) -> TableBuilder:
        return self._moved("cursor_up", self.nrow - n, self.ncol)

    def cursor_down(self, n: int = 1) -> TableBuilder:
        return self._moved("cursor_down", self.nrow + n, self.ncol)

    def cursor_left(self, n: int = 1) -> TableBuilder:
        return self._moved("cursor_left", self.nrow, self.ncol - n)

    def cursor_right(self, n: int = 1) -> TableBuilder:
        return self._moved("cursor_right", self.nrow, self.ncol + n)

    def cursor_pos(self, nrow: int, ncol: int) -> TableBuilder:
        """Move the cursor to an absolute position."""
        return self._moved("cursor_pos", nrow, ncol)

    def carriage_return(self) -> TableBuilder:
        """First column, same row."""
        return replace(self, ncol=1)

    def line_feed(self, n: int = 1) -> TableBuilder:
        """Next line, same column."""
        return self.cursor_down(n)

    def new_line(self) -> TableBuilder:
        return self.carriage_return().line_feed()

    def new_row(self) -> TableBuilder:
        """First column of the first row past all defined rows."""
        return self.home().cursor_down(self.table.nrows)

    def new_col(self) -> TableBuilder:
        """Top row, first column past the end of the top row."""
        return self.home().cursor_right(self.table.width(1))

    # ─── Writing ─────────────────────────────────────────────────────────

    def write_cell(self, x: Any, subrow: Any = None, subcol: Any = None) -> TableBuilder:
        """Write ``x`` at the cursor, overwriting what is there.

        ``subrow``/``subcol`` identify a sub element of the row/column AST
        node for traceability. The cursor does not move.
        """
        if self.nrow > self.table.nrows:
            log.debug("Growing table from %d to %d rows", self.table.nrows, self.nrow)
        value = cell(x, row=self.row, col=self.col, subrow=subrow, subcol=subcol)
        return replace(self, table=self.table.with_cell(self.nrow, self.ncol, value))

    def apply(
        self,
        items: Iterable[Any],
        fn: Callable[..., TableBuilder],
        *args: Any,
        **kwargs: Any,
    ) -> TableBuilder:
        """Fold ``fn(builder, item, *args, **kwargs)`` over ``items``.

        Returns the builder produced by the last call (``self`` if empty).
        """
        tb = self
        for item in items:
            tb = fn(tb, item, *args, **kwargs)
        return tb

    def add_col(self, *elements: Any, subrow: Any = None, subcol: Any = None) -> TableBuilder:
        """Write elements left to right, leaving the cursor past the last one."""
        return self.apply(
            args_flatten(*elements),
            lambda tb, x: tb.write_cell(x, subrow=subrow, subcol=subcol).cursor_right(),
        )

    def add_row(self, *elements: Any, subrow: Any = None, subcol: Any = None) -> TableBuilder:
        """Write elements top to bottom, leaving the cursor below the last one."""
        return self.apply(
            args_flatten(*elements),
            lambda tb, x: tb.write_cell(x, subrow=subrow, subcol=subcol).cursor_down(),
        )

    # ─── Headers ─────────────────────────────────────────────────────────

    def row_header(self, *elements: Any, sub: bool = True) -> TableBuilder:
        """Attach a row header level.

        The first call creates the row header; later calls add sub headers
        unless ``sub=False``.
        """
        return new_header(self, Axis.ROW, sub, *elements)

    def col_header(self, *elements: Any, sub: bool = True) -> TableBuilder:
        """Attach a column header level.

        The first call creates the column header; later calls add sub headers
        unless ``sub=False``.
        """
        return new_header(self, Axis.COL, sub, *elements)


def new_table_builder(row: Any, column: Any) -> TableBuilder:
    """Empty builder anchored to AST nodes, cursor at (1, 1) on a 1x1 table."""
    return TableBuilder(nrow=1, ncol=1, table=cell_table(1, 1), row=row, col=column)


def new_header(table_builder: TableBuilder, axis: Axis | str, sub: bool, *elements: Any) -> TableBuilder:
    """Append a header level to ``axis``, creating the header if needed.

    Cells are tagged ``SUBHEADER`` only when ``sub`` is set and the axis
    already has a header; the first level is always a plain header. With
    ``sub=False`` on an existing header, the level is appended as another
    top-level header rather than replacing anything.

    The grid and cursor are left untouched.
    """
    axis = Axis.coerce(axis)
    existing = table_builder.table.header(axis)
    role = CellRole.SUBHEADER if existing is not None and sub else CellRole.HEADER

    level = tuple(
        cell(x, row=table_builder.row, col=table_builder.col, role=role)
        for x in args_flatten(*elements)
    )
    log.debug(
        "Attaching %s %s level %d (%d cells)",
        axis.value,
        role.value,
        0 if existing is None else len(existing),
        len(level),
    )
    return replace(table_builder, table=table_builder.table.with_header(axis, level))
