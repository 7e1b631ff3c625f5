"""Depth-first walker over document trees.

Subclasses override the ``visit_*`` hooks they care about. The default hooks
walk into children and do nothing else, so a visitor that only needs sections
only overrides :meth:`Visitor.visit_section`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, assert_never

from ..core.exceptions import StructuralError
from ..model.elements import (
    ClearPage,
    Environment,
    Newline,
    PageBreak,
    PlainText,
    TableOfContents,
    TitlePage,
    UserDefined,
)
from ..model.equations import Align, Equation
from ..model.lists import List
from ..model.paragraph import Bold, InlineElement, InlineMath, Italic, Paragraph, Plain
from ..model.section import Section


if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..model.document import Document, Preamble
    from ..model.elements import Directive, Element


@contextmanager
def nesting_guard() -> Iterator[None]:
    """Report trees nested past the interpreter recursion limit as structural errors."""
    try:
        yield
    except RecursionError as exc:
        raise StructuralError(
            "Document tree is nested too deeply to traverse; "
            "raise sys.setrecursionlimit() or flatten the sections"
        ) from exc


class Visitor:
    """Base class dispatching every element variant to a dedicated hook."""

    def visit_document(self, document: Document) -> None:
        self.visit_preamble(document.preamble)
        for element in document:
            self.visit_element(element)

    def visit_preamble(self, preamble: Preamble) -> None:
        return

    def visit_element(self, element: Element, depth: int = 0) -> None:
        """Dispatch ``element`` to its hook; ``depth`` is the section nesting level."""
        match element:
            case Section():
                self.visit_section(element, depth)
            case Paragraph():
                self.visit_paragraph(element)
            case PlainText():
                self.visit_plain_text(element)
            case List():
                self.visit_list(element)
            case Align():
                self.visit_align(element)
            case Equation():
                self.visit_equation(element)
            case Environment():
                self.visit_environment(element)
            case UserDefined():
                self.visit_user_defined(element)
            case TitlePage() | TableOfContents() | ClearPage() | PageBreak() | Newline():
                self.visit_directive(element)
            case _:
                assert_never(element)

    def visit_section(self, section: Section, depth: int) -> None:
        for child in section:
            self.visit_element(child, depth + 1)

    def visit_paragraph(self, paragraph: Paragraph) -> None:
        for inline in paragraph.elements:
            self.visit_inline(inline)

    def visit_inline(self, element: InlineElement) -> None:
        match element:
            case Bold(inner) | Italic(inner):
                self.visit_inline(inner)
            case Plain() | InlineMath():
                return
            case _:
                assert_never(element)

    def visit_plain_text(self, text: PlainText) -> None:
        return

    def visit_list(self, items: List) -> None:
        return

    def visit_align(self, align: Align) -> None:
        for row in align:
            self.visit_equation_row(row)

    def visit_equation_row(self, equation: Equation) -> None:
        return

    def visit_equation(self, equation: Equation) -> None:
        return

    def visit_environment(self, environment: Environment) -> None:
        return

    def visit_user_defined(self, element: UserDefined) -> None:
        return

    def visit_directive(self, directive: Directive) -> None:
        return


__all__ = ["Visitor", "nesting_guard"]
