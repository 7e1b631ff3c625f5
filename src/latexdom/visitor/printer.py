"""Rendering engine turning a document tree into LaTeX source.

Whitespace contract
: every block element ends with a newline; paragraphs add one more newline
  to leave a blank line behind them; plain text ends its paragraph with
  ``\\par``; a section with children is followed by
  a blank line before its first child.
: math rows, environment lines, and user defined source are written verbatim;
  every other piece of text goes through
  :func:`~latexdom.adapters.latex.utils.escape_latex_chars`.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, assert_never

from slugify import slugify

from ..adapters.latex.utils import escape_latex_chars
from ..core.config import DEFAULT_SETTINGS, MAX_SECTION_DEPTH, RenderSettings
from ..core.diagnostics import DiagnosticEmitter, NullEmitter, format_event_message
from ..core.exceptions import SinkFailureError, StructuralError, exception_hint
from ..model.paragraph import Bold, InlineElement, InlineMath, Italic, Plain
from .base import Visitor, nesting_guard


if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..core.sink import TextSink
    from ..model.document import Document, Preamble
    from ..model.elements import Directive, Element, Environment, PlainText, UserDefined
    from ..model.equations import Align, Equation
    from ..model.lists import List
    from ..model.paragraph import Paragraph
    from ..model.section import Section


logger = logging.getLogger(__name__)

SECTION_COMMANDS: tuple[str, ...] = ("section", "subsection", "subsubsection")


class Printer(Visitor):
    """Visitor writing LaTeX source into an append-only sink."""

    def __init__(
        self,
        sink: TextSink,
        *,
        settings: RenderSettings | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.sink = sink
        self.settings = settings or DEFAULT_SETTINGS
        self.emitter = emitter or NullEmitter()
        self.written = 0

    def write(self, text: str) -> None:
        """Append ``text`` to the sink, converting sink failures."""
        try:
            self.sink.write(text)
        except (OSError, ValueError) as exc:
            message = f"Output sink rejected a write: {exception_hint(exc) or type(exc).__name__}"
            self.emitter.error(message, exc)
            raise SinkFailureError(message) from exc
        self.written += len(text)

    def writeln(self, text: str = "") -> None:
        self.write(f"{text}\n")

    def escape(self, text: str) -> str:
        return escape_latex_chars(text, legacy_accents=self.settings.legacy_latex_accents)

    def render_document(self, document: Document) -> None:
        """Entry point for whole documents."""
        with nesting_guard():
            self.visit_document(document)

    def render_element(self, element: Element) -> None:
        """Entry point for a single element rendered at the top level."""
        with nesting_guard():
            self.visit_element(element)

    def visit_document(self, document: Document) -> None:
        logger.debug(
            "Rendering %s document with %d top-level element(s)",
            document.document_class.value,
            len(document),
        )
        if document.is_part:
            for element in document:
                self.visit_element(element)
        else:
            self.writeln(document.class_declaration())
            self.visit_preamble(document.preamble)
            self.writeln(r"\begin{document}")
            for element in document:
                self.visit_element(element)
            self.writeln(r"\end{document}")
        if self.emitter.debug_enabled:
            self.emitter.event(
                "render_complete", {"elements": len(document), "characters": self.written}
            )

    def visit_preamble(self, preamble: Preamble) -> None:
        for package in preamble.packages:
            if package.options:
                self.writeln(f"\\usepackage[{','.join(package.options)}]{{{package.name}}}")
            else:
                self.writeln(f"\\usepackage{{{package.name}}}")

        if preamble.packages and preamble.has_metadata:
            self.writeln()

        for command, value in (
            ("title", preamble.title),
            ("author", preamble.author),
            ("date", preamble.date),
        ):
            if value is not None:
                self.writeln(f"\\{command}{{{self.escape(value)}}}")

    def section_command(self, section: Section, depth: int) -> str:
        """Return the sectioning command for ``depth`` under the depth policy."""
        if depth <= MAX_SECTION_DEPTH:
            return SECTION_COMMANDS[depth]
        if self.settings.depth_policy == "error":
            message = (
                f"Section {section.name!r} is nested {depth} levels deep; "
                f"the deepest supported level is {MAX_SECTION_DEPTH}"
            )
            self.emitter.error(message)
            raise StructuralError(message)
        command = SECTION_COMMANDS[MAX_SECTION_DEPTH]
        payload = {"name": section.name, "depth": depth, "command": command}
        logger.debug("Clamping section %r at depth %d", section.name, depth)
        self.emitter.warning(format_event_message("section_depth_clamped", payload) or "")
        return command

    def section_label(self, section: Section) -> str | None:
        if section.label is not None:
            return section.label
        if not self.settings.section_labels:
            return None
        slug = slugify(section.name, separator="-")
        return f"{self.settings.label_prefix}{slug}" if slug else None

    def visit_section(self, section: Section, depth: int) -> None:
        command = self.section_command(section, depth)
        heading = f"\\{command}{{{self.escape(section.name)}}}"
        label = self.section_label(section)
        if label:
            heading += f"\\label{{{label}}}"
        self.writeln(heading)

        if len(section):
            self.writeln()

        for child in section:
            self.visit_element(child, depth + 1)

    def visit_paragraph(self, paragraph: Paragraph) -> None:
        self.write("".join(self.format_inline(inline) for inline in paragraph.elements))
        self.write("\n\n")

    def format_inline(self, element: InlineElement) -> str:
        match element:
            case Plain(text):
                return self.escape(text)
            case Bold(inner):
                return f"\\textbf{{{self.format_inline(inner)}}}"
            case Italic(inner):
                return f"\\textit{{{self.format_inline(inner)}}}"
            case InlineMath(expr):
                return f"${expr}$"
            case _:
                assert_never(element)

    def visit_plain_text(self, text: PlainText) -> None:
        self.writeln(f"{self.escape(text.text)}\\par")

    def visit_list(self, items: List) -> None:
        env = items.kind.environment_name
        self.writeln(f"\\begin{{{env}}}")
        for item in items:
            self.writeln(f"\\item {self.escape(item)}")
        self.writeln(f"\\end{{{env}}}")

    @staticmethod
    def format_row(equation: Equation, *, nonumber: bool = True) -> str:
        row = equation.text
        if equation.label is not None:
            row += f" \\label{{{equation.label}}}"
        if nonumber and equation.not_numbered:
            row += r" \nonumber"
        return row

    def visit_align(self, align: Align) -> None:
        env = align.environment_name
        self.writeln(f"\\begin{{{env}}}")
        if len(align):
            self.writeln(" \\\\\n".join(self.format_row(row) for row in align))
        self.writeln(f"\\end{{{env}}}")

    def visit_equation(self, equation: Equation) -> None:
        env = equation.environment_name
        self.writeln(f"\\begin{{{env}}}")
        self.writeln(self.format_row(equation, nonumber=False))
        self.writeln(f"\\end{{{env}}}")

    def visit_environment(self, environment: Environment) -> None:
        self.writeln(f"\\begin{{{environment.name}}}")
        for line in environment.lines:
            self.writeln(line)
        self.writeln(f"\\end{{{environment.name}}}")

    def visit_user_defined(self, element: UserDefined) -> None:
        self.writeln(element.source)

    def visit_directive(self, directive: Directive) -> None:
        self.writeln(f"\\{directive.command}")


def render_to_string(
    document: Document,
    *,
    settings: RenderSettings | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Render ``document`` into a new string buffer."""
    buffer = io.StringIO()
    Printer(buffer, settings=settings, emitter=emitter).render_document(document)
    return buffer.getvalue()


__all__ = ["SECTION_COMMANDS", "Printer", "render_to_string"]
