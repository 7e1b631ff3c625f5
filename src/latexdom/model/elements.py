"""Leaf elements and the closed union of everything a tree may hold.

Adding a variant to :data:`Element` requires a matching branch in
:meth:`latexdom.visitor.Visitor.visit_element`; the dispatch ends in
``assert_never`` so type checkers flag the omission.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, TypeAlias, Union

from ..core.exceptions import InvalidNodeError
from .base import RenderableElement
from .equations import Align, Equation
from .lists import List
from .paragraph import Paragraph


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .section import Section


def _as_line(value: object) -> str:
    if not isinstance(value, str):
        raise InvalidNodeError(f"Environment lines must be text, not {type(value).__name__!r}")
    return value


@dataclass(slots=True)
class PlainText(RenderableElement):
    """A single line of escaped text ending its paragraph with ``\\par``."""

    text: str


@dataclass(slots=True)
class Environment(RenderableElement):
    """A named environment wrapping raw LaTeX lines."""

    name: str
    lines: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        lines = [self.lines] if isinstance(self.lines, str) else self.lines
        self.lines = [_as_line(line) for line in lines]

    def push(self, line: str) -> Environment:
        self.lines.append(_as_line(line))
        return self


@dataclass(slots=True)
class UserDefined(RenderableElement):
    """Raw LaTeX emitted verbatim on its own line."""

    source: str


@dataclass(frozen=True, slots=True)
class Directive(RenderableElement):
    """Parameterless control command such as ``\\clearpage``."""

    command: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class TitlePage(Directive):
    command: ClassVar[str] = "maketitle"


@dataclass(frozen=True, slots=True)
class TableOfContents(Directive):
    command: ClassVar[str] = "tableofcontents"


@dataclass(frozen=True, slots=True)
class ClearPage(Directive):
    command: ClassVar[str] = "clearpage"


@dataclass(frozen=True, slots=True)
class PageBreak(Directive):
    command: ClassVar[str] = "pagebreak"


@dataclass(frozen=True, slots=True)
class Newline(Directive):
    command: ClassVar[str] = "newline"


Element: TypeAlias = Union[
    PlainText,
    Paragraph,
    "Section",
    List,
    Equation,
    Align,
    Environment,
    UserDefined,
    TitlePage,
    TableOfContents,
    ClearPage,
    PageBreak,
    Newline,
]


__all__ = [
    "ClearPage",
    "Directive",
    "Element",
    "Environment",
    "Newline",
    "PageBreak",
    "PlainText",
    "TableOfContents",
    "TitlePage",
    "UserDefined",
]
