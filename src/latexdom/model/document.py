"""Document root, document class selection, and preamble metadata.

Architecture
: `Document` owns a `Preamble` and the ordered top-level elements. Nothing is
  shared between documents and children never point back at their parents.
: Rendering is a projection of the current state. It can be repeated at any
  point of the document lifecycle and never mutates the model.

Usage Example
:
    >>> doc = Document(DocumentClass.ARTICLE)
    >>> _ = doc.preamble.set_title("T")
    >>> section = Section("S")
    >>> _ = section.push("Hello World")
    >>> _ = doc.push(section)
    >>> print(doc.to_latex(), end="")
    \\documentclass{article}
    \\title{T}
    \\begin{document}
    \\section{S}
    <BLANKLINE>
    Hello World
    <BLANKLINE>
    \\end{document}
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .section import Section, coerce_element


if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..core.config import RenderSettings
    from ..core.diagnostics import DiagnosticEmitter
    from ..core.sink import TextSink
    from .elements import Element


BARE_VALUE_OPTIONS = frozenset({"font_size", "paper_size"})


class DocumentClass(str, Enum):
    """LaTeX document classes supported by the model."""

    ARTICLE = "article"
    REPORT = "report"
    BOOK = "book"
    LETTER = "letter"
    BEAMER = "beamer"
    PART = "part"
    """Body-only fragment meant to be \\input into a master document."""

    def __str__(self) -> str:
        return self.value


def format_class_options(options: Mapping[str, Any]) -> list[str]:
    """Flatten a class option mapping into the bracketed option list."""
    rendered: list[str] = []
    for key, value in options.items():
        if value is None or value is True:
            rendered.append(key)
        elif value is False:
            continue
        elif key in BARE_VALUE_OPTIONS:
            rendered.append(str(value))
        else:
            rendered.append(f"{key}={value}")
    return rendered


@dataclass(frozen=True, slots=True)
class Package:
    """A ``\\usepackage`` declaration."""

    name: str
    options: tuple[str, ...] = ()


@dataclass(slots=True)
class Preamble:
    """Metadata and package declarations emitted before ``\\begin{document}``."""

    title: str | None = None
    author: str | None = None
    date: str | None = None
    packages: list[Package] = field(default_factory=list)

    def set_title(self, title: str) -> Preamble:
        self.title = title
        return self

    def set_author(self, author: str) -> Preamble:
        self.author = author
        return self

    def set_date(self, value: str | date) -> Preamble:
        self.date = value.isoformat() if isinstance(value, date) else value
        return self

    def use_package(self, name: str, *options: str) -> Preamble:
        """Declare a package; options are emitted in the given order."""
        self.packages.append(Package(name, tuple(options)))
        return self

    @property
    def has_metadata(self) -> bool:
        return any(value is not None for value in (self.title, self.author, self.date))

    def render(
        self,
        sink: TextSink,
        *,
        settings: RenderSettings | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        """Write the package and metadata lines, without the class declaration."""
        from ..visitor.printer import Printer

        Printer(sink, settings=settings, emitter=emitter).visit_preamble(self)


class Document:
    """Root of a LaTeX document tree."""

    def __init__(
        self,
        document_class: DocumentClass | str = DocumentClass.ARTICLE,
        *,
        options: Mapping[str, Any] | None = None,
        preamble: Preamble | None = None,
    ) -> None:
        self._document_class = DocumentClass(document_class)
        self._options: Mapping[str, Any] = MappingProxyType(dict(options or {}))
        self.preamble = preamble if preamble is not None else Preamble()
        self._elements: list[Element] = []

    @property
    def document_class(self) -> DocumentClass:
        return self._document_class

    @property
    def is_part(self) -> bool:
        """Part documents render their elements only, without preamble or wrapper."""
        return self._document_class is DocumentClass.PART

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def push(self, element: Element | str) -> Document:
        """Append a top-level element; strings become paragraphs."""
        self._elements.append(coerce_element(element))
        return self

    def extend(self, elements: Iterable[Element | str]) -> Document:
        for element in elements:
            self.push(element)
        return self

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return (
            self._document_class is other._document_class
            and dict(self._options) == dict(other._options)
            and self.preamble == other.preamble
            and self._elements == other._elements
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Document({self._document_class.value!r}, options={dict(self._options)!r}, "
            f"elements={len(self._elements)})"
        )

    def class_declaration(self) -> str:
        options = format_class_options(self._options)
        if options:
            return f"\\documentclass[{','.join(options)}]{{{self._document_class.value}}}"
        return f"\\documentclass{{{self._document_class.value}}}"

    def render(
        self,
        sink: TextSink,
        *,
        settings: RenderSettings | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        """Write the complete document to ``sink``.

        Raises :class:`~latexdom.core.exceptions.SinkFailureError` as soon as
        the sink rejects a write; output written before the failure is
        incomplete and should be discarded.
        """
        from ..visitor.printer import Printer

        Printer(sink, settings=settings, emitter=emitter).render_document(self)

    def to_latex(self, *, settings: RenderSettings | None = None) -> str:
        """Render the document into a string."""
        from ..visitor.printer import render_to_string

        return render_to_string(self, settings=settings)


__all__ = [
    "BARE_VALUE_OPTIONS",
    "Document",
    "DocumentClass",
    "Package",
    "Preamble",
    "format_class_options",
]
