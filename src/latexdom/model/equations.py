"""Display math: single equations and ``align`` blocks.

Math source is raw LaTeX by contract and is never escaped.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..core.exceptions import InvalidNodeError
from .base import RenderableElement


@dataclass(slots=True)
class Equation(RenderableElement):
    """One row of math, optionally labelled.

    Inside an :class:`Align` the equation is a single row; pushed directly
    into a section or document it renders as an ``equation`` environment.
    """

    text: str
    label: str | None = None
    not_numbered: bool = False

    @classmethod
    def with_label(cls, label: str, text: str) -> Equation:
        return cls(text, label=label)

    def set_label(self, label: str) -> Equation:
        self.label = label
        return self

    def no_number(self) -> Equation:
        """Suppress the number of this equation."""
        self.not_numbered = True
        return self

    @property
    def environment_name(self) -> str:
        return "equation*" if self.not_numbered else "equation"


@dataclass(slots=True)
class Align(RenderableElement):
    """Rows rendered inside ``align`` (numbered) or ``align*``."""

    rows: list[Equation] = field(default_factory=list)
    numbered: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.rows, (str, Equation)):
            self.rows = [self.rows]
        self.rows = [_as_equation(row) for row in self.rows]

    def push(self, row: Equation | str) -> Align:
        """Append a row and return the block for chaining."""
        self.rows.append(_as_equation(row))
        return self

    @property
    def environment_name(self) -> str:
        return "align" if self.numbered else "align*"

    def __iter__(self) -> Iterator[Equation]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


def _as_equation(value: Equation | str) -> Equation:
    if isinstance(value, str):
        return Equation(value)
    if isinstance(value, Equation):
        return value
    raise InvalidNodeError(f"Cannot add {type(value).__name__!r} to an align block")


__all__ = ["Align", "Equation"]
