"""Paragraphs made of plain and formatted inline runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias, Union

from ..core.exceptions import InvalidNodeError
from .base import RenderableElement


@dataclass(frozen=True, slots=True)
class Plain:
    """Literal text, escaped when rendered."""

    text: str


@dataclass(frozen=True, slots=True)
class Bold:
    """Inline element wrapped in ``\\textbf``."""

    inner: InlineElement


@dataclass(frozen=True, slots=True)
class Italic:
    """Inline element wrapped in ``\\textit``."""

    inner: InlineElement


@dataclass(frozen=True, slots=True)
class InlineMath:
    """Raw math-mode source rendered between ``$`` delimiters."""

    expr: str


InlineElement: TypeAlias = Union[Plain, Bold, Italic, InlineMath]


def _as_inline(value: InlineElement | str) -> InlineElement:
    if isinstance(value, str):
        return Plain(value)
    if isinstance(value, (Plain, Bold, Italic, InlineMath)):
        return value
    raise InvalidNodeError(f"Cannot add {type(value).__name__!r} to a paragraph")


@dataclass(slots=True)
class Paragraph(RenderableElement):
    """A block of inline elements followed by a paragraph break.

    Usage Example
    :
        >>> para = Paragraph.from_text("Hello ")
        >>> _ = para.bold("World").push_text("!")
        >>> len(para)
        3
    """

    elements: list[InlineElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.elements, (str, Plain, Bold, Italic, InlineMath)):
            self.elements = [_as_inline(self.elements)]
        else:
            self.elements = [_as_inline(element) for element in self.elements]

    @classmethod
    def from_text(cls, text: str) -> Paragraph:
        return cls([Plain(text)])

    def push(self, element: InlineElement | str) -> Paragraph:
        self.elements.append(_as_inline(element))
        return self

    def push_text(self, text: str) -> Paragraph:
        return self.push(Plain(text))

    def bold(self, value: InlineElement | str) -> Paragraph:
        return self.push(Bold(_as_inline(value)))

    def italic(self, value: InlineElement | str) -> Paragraph:
        return self.push(Italic(_as_inline(value)))

    def math(self, expr: str) -> Paragraph:
        return self.push(InlineMath(expr))

    def __len__(self) -> int:
        return len(self.elements)


__all__ = ["Bold", "InlineElement", "InlineMath", "Italic", "Paragraph", "Plain"]
