from __future__ import annotations

import sys

import pytest

from latexdom import Document, List, ListKind, Section, StructuralError
from latexdom.model.elements import Directive
from latexdom.model.paragraph import Paragraph
from latexdom.visitor import OutlineEntry, Visitor, collect_outline


def _document() -> Document:
    intro = Section("Introduction", label="sec:intro")
    background = Section("Background")
    background.push(Section("History")).push("details")
    intro.push("text").push(background)
    doc = Document()
    doc.push(intro).push(Section("Conclusion")).push(List(ListKind.ITEMIZE, ["x"]))
    return doc


def test_outline_follows_document_order() -> None:
    assert collect_outline(_document()) == [
        OutlineEntry(level=0, title="Introduction", label="sec:intro"),
        OutlineEntry(level=1, title="Background"),
        OutlineEntry(level=2, title="History"),
        OutlineEntry(level=0, title="Conclusion"),
    ]


def test_custom_visitor_sees_every_element() -> None:
    class Counter(Visitor):
        def __init__(self) -> None:
            self.paragraphs = 0
            self.lists = 0
            self.directives = 0

        def visit_paragraph(self, paragraph: Paragraph) -> None:
            self.paragraphs += 1

        def visit_list(self, items: List) -> None:
            self.lists += 1

        def visit_directive(self, directive: Directive) -> None:
            self.directives += 1

    counter = Counter()
    counter.visit_document(_document())

    assert counter.paragraphs == 2
    assert counter.lists == 1
    assert counter.directives == 0


def test_outline_does_not_mutate_document() -> None:
    doc = _document()
    before = doc.to_latex()

    collect_outline(doc)

    assert doc.to_latex() == before


def test_outline_of_overly_deep_tree_is_structural_error() -> None:
    root = Section("root")
    current = root
    for index in range(sys.getrecursionlimit() + 50):
        child = Section(f"level {index}")
        current.push(child)
        current = child
    doc = Document().push(root)

    with pytest.raises(StructuralError, match="nested too deeply"):
        collect_outline(doc)
