"""Flattening of variadic table elements.

Call sites pass a mix of single values and collections, e.g.
``add_row(value, [a, b], Vector.n([1, 2, 3]))``; flattening turns that into
one entry per logical cell. Only one level is flattened, and cells are never
split apart.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterable

from gridcursor.cells import TaggedValue

_ATOMIC_SEQUENCES = (str, bytes, bytearray)


@dataclass(frozen=True)
class Vector:
    """A typed vector of values.

    Unlike a plain list, every element produced by flattening inherits the
    vector's ``kind`` tag and ``name``.
    """

    values: tuple[Any, ...] = ()
    kind: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def n(cls, values: Iterable[Any] | int, name: str | None = None) -> Vector:
        """Counts vector (kind ``"N"``); a bare int is a single count."""
        if isinstance(values, int):
            values = (values,)
        return cls(values, kind="N", name=name)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    @property
    def tagged(self) -> bool:
        return self.kind is not None or self.name is not None


def args_flatten(*args: Any) -> list[Any]:
    """Flatten arguments one level into a list of cell-sized entries.

    - Any ordered sequence (``list``, ``tuple``, ``range``, ``deque``, custom
      ``Sequence`` types) contributes its elements unchanged.
    - A :class:`Vector` contributes its elements, each wrapped as a
      :class:`TaggedValue` when the vector has a kind or name.
    - Anything else (scalars, ``None``, strings, bytes, cells, labels, sets
      and other unordered collections) is one entry.

    Empty collections contribute nothing.
    """
    flat: list[Any] = []
    for a in args:
        if isinstance(a, Vector):
            if a.tagged:
                flat.extend(TaggedValue(v, kind=a.kind, name=a.name) for v in a.values)
            else:
                flat.extend(a.values)
        elif isinstance(a, Sequence) and not isinstance(a, _ATOMIC_SEQUENCES):
            flat.extend(a)
        else:
            flat.append(a)
    return flat
