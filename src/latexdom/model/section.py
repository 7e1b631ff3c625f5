"""Sections: the recursive container of the document tree.

A section never stores its depth. The printer derives it while walking the
tree, so a section renders as ``\\section`` at the top level and as
``\\subsection`` once nested inside another section.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..core.exceptions import InvalidNodeError
from .base import RenderableElement
from .elements import (
    ClearPage,
    Element,
    Environment,
    Newline,
    PageBreak,
    PlainText,
    TableOfContents,
    TitlePage,
    UserDefined,
)
from .equations import Align, Equation
from .lists import List
from .paragraph import Paragraph


@dataclass(slots=True)
class Section(RenderableElement):
    """A named section holding an ordered list of child elements."""

    name: str
    elements: list[Element] = field(default_factory=list)
    label: str | None = None

    def __post_init__(self) -> None:
        children = self.elements
        if isinstance(children, (str, *ELEMENT_TYPES)):
            children = [children]
        self.elements = []
        for child in children:
            self.push(child)

    def push(self, element: Element | str) -> Section:
        """Append a child; strings become paragraphs."""
        child = coerce_element(element)
        if isinstance(child, Section) and child.contains(self):
            raise InvalidNodeError(f"Section {self.name!r} cannot contain itself")
        self.elements.append(child)
        return self

    def contains(self, other: Section) -> bool:
        """Return True when ``other`` is this section or one of its descendants."""
        pending: list[Section] = [self]
        while pending:
            current = pending.pop()
            if current is other:
                return True
            pending.extend(child for child in current.elements if isinstance(child, Section))
        return False

    def set_label(self, label: str) -> Section:
        self.label = label
        return self

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)


ELEMENT_TYPES: tuple[type, ...] = (
    PlainText,
    Paragraph,
    Section,
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
)


def coerce_element(value: object) -> Element:
    """Return ``value`` as a tree element, wrapping strings in paragraphs."""
    if isinstance(value, str):
        return Paragraph.from_text(value)
    if isinstance(value, ELEMENT_TYPES):
        return value  # type: ignore[return-value]
    raise InvalidNodeError(f"Cannot add {type(value).__name__!r} to a document tree")


__all__ = ["ELEMENT_TYPES", "Section", "coerce_element"]
