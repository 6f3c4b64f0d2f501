"""Export finished tables to plain values and pandas DataFrames.

These helpers hand the grid to downstream code; formatting for display
(HTML, text, LaTeX) is left to renderers.

Usage::

    from gridcursor import to_values, to_pandas

    grid = to_values(tb.table, text=True)
    df = to_pandas(tb.table)
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from gridcursor.cells import Cell, CellTable, Header, TaggedValue

if TYPE_CHECKING:
    import pandas as pd


def _cell_value(c: Cell | None, text: bool) -> Any:
    if c is None or c.value is None:
        return None
    if text:
        return str(c.value)
    if isinstance(c.value, TaggedValue):
        return c.value.value
    return c.value


def to_values(table: CellTable, *, text: bool = False) -> list[list[Any]]:
    """Rectangular grid of cell values, short rows padded with None.

    Tagged vector elements are unwrapped to their bare value.

    Args:
        table: The table to export.
        text: If True, convert values with ``str`` (labels render as
            ``"text (units)"``); blanks stay None.
    """
    width = table.ncols
    out: list[list[Any]] = []
    for row in table.rows:
        values = [_cell_value(c, text) for c in row]
        values.extend([None] * (width - len(values)))
        out.append(values)
    return out


def _header_index(header: Header | None, length: int):
    """Build a pandas index from header levels whose length all equal ``length``."""
    import pandas as pd

    if not header or length == 0:
        return None
    if any(len(level) != length for level in header):
        return None
    labels = [[_cell_value(c, True) for c in level] for level in header]
    if len(labels) == 1:
        return pd.Index(labels[0])
    return pd.MultiIndex.from_arrays(labels)


def to_pandas(table: CellTable) -> pd.DataFrame:
    """Convert a table to a pandas DataFrame.

    Column header levels become the column index (a MultiIndex when nested)
    when each level spans the full table width; row header levels become the
    row index when each spans every row. Headers that do not line up with the
    grid are left out.

    Raises:
        ImportError: If pandas is not installed.
    """
    try:
        import pandas as pd
    except ImportError as e:
        raise ImportError(
            "pandas is required for DataFrame export. "
            "Install it with: pip install pandas "
            "or: pip install gridcursor[pandas]"
        ) from e

    df = pd.DataFrame(to_values(table))
    columns = _header_index(table.col_header, df.shape[1])
    if columns is not None:
        df.columns = columns
    index = _header_index(table.row_header, df.shape[0])
    if index is not None:
        df.index = index
    return df
