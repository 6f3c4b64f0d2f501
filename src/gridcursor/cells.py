"""Cell model for tables under construction.

A table is a grid of :class:`Cell` values plus optional row/column header
metadata. Cells carry provenance (the AST nodes that produced them, plus
optional sub-indices) so indexes and tracebacks can be generated later.

Everything here is immutable: updates return new objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


# ─── Roles and axes ──────────────────────────────────────────────────────────


class CellRole(Enum):
    """Role tag of a cell.

    Roles form a small lattice: ``SUBHEADER`` satisfies ``HEADER``, and every
    role satisfies ``PLAIN``. Consumers written against ``HEADER`` must accept
    a ``SUBHEADER``; use :meth:`satisfies` instead of comparing roles directly.
    """

    PLAIN = "plain"
    HEADER = "header"
    SUBHEADER = "subheader"

    def satisfies(self, other: CellRole) -> bool:
        return other in _SATISFIES[self]


_SATISFIES: dict[CellRole, frozenset[CellRole]] = {
    CellRole.PLAIN: frozenset({CellRole.PLAIN}),
    CellRole.HEADER: frozenset({CellRole.PLAIN, CellRole.HEADER}),
    CellRole.SUBHEADER: frozenset({CellRole.PLAIN, CellRole.HEADER, CellRole.SUBHEADER}),
}


class Axis(Enum):
    """Table axis a header is attached to."""

    ROW = "row"
    COL = "col"

    @classmethod
    def coerce(cls, value: Axis | str) -> Axis:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown axis: {value!r} (expected 'row' or 'col')") from None


# ─── Values ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CellLabel:
    """A display label with optional units."""

    text: str
    units: str | None = None

    def __str__(self) -> str:
        if self.units is None:
            return self.text
        return f"{self.text} ({self.units})"


@dataclass(frozen=True)
class TaggedValue:
    """A single element split out of a typed vector, keeping its tag and name."""

    value: Any
    kind: str | None = None
    name: str | None = None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Cell:
    """A value wrapped with AST provenance and a role tag."""

    value: Any = None
    row: Any = None
    col: Any = None
    subrow: Any = None
    subcol: Any = None
    role: CellRole = CellRole.PLAIN

    @property
    def is_header(self) -> bool:
        return self.role.satisfies(CellRole.HEADER)

    @property
    def is_subheader(self) -> bool:
        return self.role.satisfies(CellRole.SUBHEADER)

    @property
    def is_blank(self) -> bool:
        return self.value is None


BLANK = Cell()


def cell(
    x: Any,
    row: Any = None,
    col: Any = None,
    subrow: Any = None,
    subcol: Any = None,
    role: CellRole = CellRole.PLAIN,
) -> Cell:
    """Wrap ``x`` as a cell with the given provenance.

    An existing :class:`Cell` keeps its value and role; its provenance is
    replaced, and its role is upgraded when a non-plain role is requested.
    """
    if isinstance(x, Cell):
        return replace(
            x,
            row=row,
            col=col,
            subrow=subrow,
            subcol=subcol,
            role=x.role if role is CellRole.PLAIN else role,
        )
    return Cell(value=x, row=row, col=col, subrow=subrow, subcol=subcol, role=role)


def cell_label(text: str, units: str | None = None) -> CellLabel:
    return CellLabel(text=text, units=units)


# ─── Table ───────────────────────────────────────────────────────────────────

Level = tuple[Cell, ...]
Header = tuple[Level, ...]


@dataclass(frozen=True)
class CellTable:
    """Grid of cells plus row/column header metadata.

    ``rows`` is ragged: rows may differ in width and may be empty. Each header
    is ``None`` or a tuple of levels; the first level is the primary header and
    later levels are stacked beneath (column) or beside (row) it.
    """

    rows: tuple[tuple[Cell, ...], ...] = field(default_factory=tuple)
    row_header: Header | None = None
    col_header: Header | None = None

    @property
    def nrows(self) -> int:
        return len(self.rows)

    def width(self, row: int = 1) -> int:
        """Number of cells in a 1-based row (0 for rows that do not exist)."""
        if row < 1 or row > len(self.rows):
            return 0
        return len(self.rows[row - 1])

    @property
    def ncols(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    def get(self, nrow: int, ncol: int) -> Cell | None:
        """Cell at a 1-based position, or None outside the written area."""
        if nrow < 1 or ncol < 1 or nrow > len(self.rows):
            return None
        row = self.rows[nrow - 1]
        if ncol > len(row):
            return None
        return row[ncol - 1]

    def header(self, axis: Axis | str) -> Header | None:
        axis = Axis.coerce(axis)
        return self.row_header if axis is Axis.ROW else self.col_header

    def with_cell(self, nrow: int, ncol: int, value: Cell) -> CellTable:
        """Return a table with ``value`` at (nrow, ncol), growing as needed.

        Missing rows are appended empty; a short row is padded with blank
        cells up to ``ncol``.
        """
        rows = list(self.rows)
        if nrow > len(rows):
            rows.extend(() for _ in range(nrow - len(rows)))
        row = list(rows[nrow - 1])
        if ncol > len(row):
            row.extend(BLANK for _ in range(ncol - len(row)))
        row[ncol - 1] = value
        rows[nrow - 1] = tuple(row)
        return replace(self, rows=tuple(rows))

    def with_header(self, axis: Axis | str, level: Level) -> CellTable:
        """Return a table with ``level`` appended to the header on ``axis``."""
        axis = Axis.coerce(axis)
        current = self.header(axis)
        updated = (level,) if current is None else current + (level,)
        if axis is Axis.ROW:
            return replace(self, row_header=updated)
        return replace(self, col_header=updated)


def cell_table(nrow: int, ncol: int) -> CellTable:
    """Blank table of the given shape."""
    return CellTable(rows=tuple(tuple(BLANK for _ in range(ncol)) for _ in range(nrow)))
