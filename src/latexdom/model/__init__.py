"""Typed document tree: sections, paragraphs, lists, math, and directives."""

from __future__ import annotations

from .base import Renderable, RenderableElement
from .document import Document, DocumentClass, Package, Preamble, format_class_options
from .elements import (
    ClearPage,
    Directive,
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
from .lists import List, ListKind
from .paragraph import Bold, InlineElement, InlineMath, Italic, Paragraph, Plain
from .section import ELEMENT_TYPES, Section, coerce_element


__all__ = [
    "ELEMENT_TYPES",
    "Align",
    "Bold",
    "ClearPage",
    "Directive",
    "Document",
    "DocumentClass",
    "Element",
    "Environment",
    "Equation",
    "InlineElement",
    "InlineMath",
    "Italic",
    "List",
    "ListKind",
    "Newline",
    "Package",
    "PageBreak",
    "Paragraph",
    "Plain",
    "PlainText",
    "Preamble",
    "Renderable",
    "RenderableElement",
    "Section",
    "TableOfContents",
    "TitlePage",
    "UserDefined",
    "coerce_element",
    "format_class_options",
]
