"""Label derivation for AST nodes.

Nodes should have data attached by the statistical reduction before a label
is derived. A label attribute of the form ``name(units)`` is split into text
and units; an explicit ``units`` attribute always takes precedence.

Example::

    node = Node("wt", NodeData(label="Weight(kg)"))
    derive_label(node)  # CellLabel(text="Weight", units="kg")
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from gridcursor.cells import CellLabel, cell_label
from gridcursor.nodes import AstNode

log = logging.getLogger(__name__)

# "<name>(<units>)": greedy name, so only the last parenthesized group is units
_UNITS_PATTERN = r"(.*)\((.*)\)"


@dataclass
class LabelConfig:
    """How labels are parsed from node data."""

    pattern: str = _UNITS_PATTERN
    strip: bool = False  # strip whitespace around text and units

    @classmethod
    def from_dict(cls, data: dict) -> LabelConfig:
        return cls(
            pattern=data.get("pattern", _UNITS_PATTERN),
            strip=bool(data.get("strip", False)),
        )


_DEFAULT_CONFIG = LabelConfig()


def _split_units(label: str, regex: re.Pattern[str]) -> tuple[str, str | None]:
    """Split ``name(units)``; labels without the suffix come back verbatim."""
    m = regex.match(label)
    if m is None:
        return label, None
    return m.group(1), m.group(2)


def _strip(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


def derive_label(node: AstNode, config: LabelConfig | None = None) -> CellLabel:
    """Derive the display label of an AST node.

    Falls back to ``node.name()`` when the node has no usable data; any
    failure while reading ``node.data`` is logged and ignored. Non-string
    labels are converted with ``str`` before matching.
    """
    config = config or _DEFAULT_CONFIG
    text = node.name()
    units: str | None = None

    try:
        label = getattr(node.data, "label", None)
        if label is not None:
            text, units = _split_units(str(label), re.compile(config.pattern))
    except Exception as e:
        log.debug("Label lookup failed for %r, using name: %s", text, e)

    try:
        explicit = getattr(node.data, "units", None)
        if explicit is not None:
            units = explicit
    except Exception as e:
        log.debug("Units lookup failed for %r: %s", text, e)

    if config.strip:
        text = _strip(text)
        units = _strip(units)

    return cell_label(text, units)
