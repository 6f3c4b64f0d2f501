"""gridcursor: build labeled tables cell by cell with a movable cursor."""

from gridcursor.builder import TableBuilder, new_header, new_table_builder
from gridcursor.cells import (
    Axis,
    Cell,
    CellLabel,
    CellRole,
    CellTable,
    TaggedValue,
    cell,
    cell_label,
    cell_table,
)
from gridcursor.errors import CursorBoundsError
from gridcursor.flatten import Vector, args_flatten
from gridcursor.labels import LabelConfig, derive_label
from gridcursor.nodes import AstNode, Node, NodeData
from gridcursor.serialize import to_pandas, to_values

__all__ = [
    # Builder
    "TableBuilder",
    "new_table_builder",
    "new_header",
    # Cells
    "Axis",
    "Cell",
    "CellLabel",
    "CellRole",
    "CellTable",
    "TaggedValue",
    "cell",
    "cell_label",
    "cell_table",
    # Errors
    "CursorBoundsError",
    # Flattening
    "Vector",
    "args_flatten",
    # Labels
    "LabelConfig",
    "derive_label",
    # Nodes
    "AstNode",
    "Node",
    "NodeData",
    # Export
    "to_pandas",
    "to_values",
]
