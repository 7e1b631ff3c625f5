"""Primary public API for latexdom."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from latexdom.adapters.latex.utils import escape, escape_latex_chars, unescape_latex_chars
from latexdom.core.config import RenderSettings
from latexdom.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from latexdom.core.exceptions import (
    InvalidNodeError,
    LatexRenderingError,
    RenderError,
    SinkFailureError,
    StructuralError,
)
from latexdom.core.sink import BinarySink, StringSink, TextSink
from latexdom.model import (
    Align,
    Bold,
    ClearPage,
    Document,
    DocumentClass,
    Element,
    Environment,
    Equation,
    InlineMath,
    Italic,
    List,
    ListKind,
    Newline,
    Package,
    PageBreak,
    Paragraph,
    Plain,
    PlainText,
    Preamble,
    Renderable,
    Section,
    TableOfContents,
    TitlePage,
    UserDefined,
)
from latexdom.visitor import (
    OutlineCollector,
    OutlineEntry,
    Printer,
    Visitor,
    collect_outline,
    render_to_string,
)


try:
    __version__ = _pkg_version("latexdom")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Align",
    "BinarySink",
    "Bold",
    "ClearPage",
    "DiagnosticEmitter",
    "Document",
    "DocumentClass",
    "Element",
    "Environment",
    "Equation",
    "InlineMath",
    "InvalidNodeError",
    "Italic",
    "LatexRenderingError",
    "List",
    "ListKind",
    "LoggingEmitter",
    "Newline",
    "NullEmitter",
    "OutlineCollector",
    "OutlineEntry",
    "Package",
    "PageBreak",
    "Paragraph",
    "Plain",
    "PlainText",
    "Preamble",
    "Printer",
    "RenderError",
    "RenderSettings",
    "Renderable",
    "Section",
    "SinkFailureError",
    "StringSink",
    "StructuralError",
    "TableOfContents",
    "TextSink",
    "TitlePage",
    "UserDefined",
    "Visitor",
    "__version__",
    "collect_outline",
    "escape",
    "escape_latex_chars",
    "render_to_string",
    "unescape_latex_chars",
]
