"""AST node interface consumed by label derivation and table builders.

The formula parser and the statistical reduction that attach ``data`` to nodes
live outside this package. Anything exposing ``name()`` and an optional
``data`` attribute can be passed in; :class:`Node` is a minimal concrete
implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict


class AstNode(Protocol):
    """Anything the builder can anchor to or derive a label from."""

    def name(self) -> str: ...


class NodeData(BaseModel):
    """Reduced data attached to an AST node.

    ``label`` may carry units as a trailing parenthesized suffix, e.g.
    ``"Weight(kg)"``. An explicit ``units`` always wins over parsed units.
    """

    model_config = ConfigDict(extra="allow")

    label: str | None = None
    units: str | None = None


@dataclass(eq=False)
class Node:
    """Plain AST node: a symbol name plus optional reduced data."""

    symbol: str
    data: NodeData | None = None

    def name(self) -> str:
        return self.symbol
