from __future__ import annotations

import pytest

from latexdom import (
    Align,
    ClearPage,
    Document,
    DocumentClass,
    Environment,
    Equation,
    InvalidNodeError,
    List,
    ListKind,
    Newline,
    PageBreak,
    Paragraph,
    PlainText,
    Section,
    StringSink,
    TableOfContents,
    TitlePage,
    UserDefined,
)
from latexdom.core.diagnostics import NullEmitter


def _build_complex_document() -> Document:
    doc = Document(DocumentClass.ARTICLE)
    doc.preamble.set_title("Hello World").set_author("Michael-F-Bryan")
    doc.preamble.use_package("amsmath").use_package("parskip")

    doc.push(TitlePage()).push(ClearPage()).push(TableOfContents()).push(ClearPage())

    section = Section("Introduction")
    section.push("This is an example paragraph.")
    equations = Align()
    equations.push("y &= mx + c").push(Equation.with_label("quadratic", "y &= a x^2 + bx + c"))
    section.push("Please refer to the equations below:").push(equations)

    objectives = List(ListKind.ENUMERATE)
    objectives.push("Create a reasonably complex document").push("???").push("PROFIT!")
    section.push("Here are our objectives:").push(objectives)

    doc.push(section)
    return doc


def test_render_empty_document() -> None:
    doc = Document(DocumentClass.ARTICLE)

    assert doc.to_latex() == "\\documentclass{article}\n\\begin{document}\n\\end{document}\n"


def test_title_and_section_scenario() -> None:
    doc = Document(DocumentClass.ARTICLE)
    doc.preamble.set_title("T")
    section = Section("S")
    section.push("Hello World")
    doc.push(section)

    assert doc.to_latex() == (
        "\\documentclass{article}\n"
        "\\title{T}\n"
        "\\begin{document}\n"
        "\\section{S}\n"
        "\n"
        "Hello World\n"
        "\n"
        "\\end{document}\n"
    )


def test_complex_document() -> None:
    expected = (
        "\\documentclass{article}\n"
        "\\usepackage{amsmath}\n"
        "\\usepackage{parskip}\n"
        "\n"
        "\\title{Hello World}\n"
        "\\author{Michael-F-Bryan}\n"
        "\\begin{document}\n"
        "\\maketitle\n"
        "\\clearpage\n"
        "\\tableofcontents\n"
        "\\clearpage\n"
        "\\section{Introduction}\n"
        "\n"
        "This is an example paragraph.\n"
        "\n"
        "Please refer to the equations below:\n"
        "\n"
        "\\begin{align}\n"
        "y &= mx + c \\\\\n"
        "y &= a x^2 + bx + c \\label{quadratic}\n"
        "\\end{align}\n"
        "Here are our objectives:\n"
        "\n"
        "\\begin{enumerate}\n"
        "\\item Create a reasonably complex document\n"
        "\\item ???\n"
        "\\item PROFIT!\n"
        "\\end{enumerate}\n"
        "\\end{document}\n"
    )

    assert _build_complex_document().to_latex() == expected


def test_rendering_is_repeatable_and_does_not_mutate() -> None:
    doc = _build_complex_document()
    snapshot = _build_complex_document()

    first = doc.to_latex()
    second = doc.to_latex()

    assert first == second
    assert doc == snapshot


def test_render_into_sink_matches_to_latex() -> None:
    doc = _build_complex_document()
    sink = StringSink()

    doc.render(sink, emitter=NullEmitter())

    assert sink.getvalue() == doc.to_latex()


def test_every_variant_renders() -> None:
    doc = Document(DocumentClass.ARTICLE)
    doc.extend(
        [
            PlainText("plain"),
            Paragraph.from_text("para"),
            Section("S"),
            List(ListKind.ITEMIZE, ["i"]),
            Equation("e = 1"),
            Align(["a = 1"]),
            Environment("center", ["centered"]),
            UserDefined(r"\vspace{1em}"),
            TitlePage(),
            TableOfContents(),
            ClearPage(),
            PageBreak(),
            Newline(),
        ]
    )

    body = doc.to_latex().split("\\begin{document}\n", 1)[1]

    assert body == (
        "plain\\par\n"
        "para\n\n"
        "\\section{S}\n"
        "\\begin{itemize}\n\\item i\n\\end{itemize}\n"
        "\\begin{equation}\ne = 1\n\\end{equation}\n"
        "\\begin{align}\na = 1\n\\end{align}\n"
        "\\begin{center}\ncentered\n\\end{center}\n"
        "\\vspace{1em}\n"
        "\\maketitle\n"
        "\\tableofcontents\n"
        "\\clearpage\n"
        "\\pagebreak\n"
        "\\newline\n"
        "\\end{document}\n"
    )


def test_document_class_is_read_only() -> None:
    doc = Document(DocumentClass.BOOK, options={"font_size": "10pt"})

    with pytest.raises(AttributeError):
        doc.document_class = DocumentClass.ARTICLE  # type: ignore[misc]
    with pytest.raises(TypeError):
        doc.options["font_size"] = "12pt"  # type: ignore[index]


def test_push_rejects_unknown_values() -> None:
    doc = Document()

    with pytest.raises(InvalidNodeError):
        doc.push(object())  # type: ignore[arg-type]
    assert len(doc) == 0


def test_push_is_chainable_and_ordered() -> None:
    doc = Document()
    first = Section("A")
    second = Section("B")

    assert doc.push(first).push(second) is doc
    assert doc.elements == (first, second)
    assert list(doc) == [first, second]


def test_documents_and_elements_are_renderable() -> None:
    from latexdom import Preamble, Renderable

    for node in (Document(), Preamble(), Section("S"), Paragraph(), ClearPage(), Align()):
        assert isinstance(node, Renderable)


def test_consecutive_plain_text_stays_separate_paragraphs() -> None:
    doc = Document()
    doc.push(PlainText("first")).push(PlainText("second"))

    body = doc.to_latex().split("\\begin{document}\n", 1)[1]

    assert body == "first\\par\nsecond\\par\n\\end{document}\n"


def test_part_renders_body_only() -> None:
    doc = Document(DocumentClass.PART)
    doc.preamble.set_title("Ignored")
    doc.push(Section("Section 1").push("Some text..."))

    assert doc.to_latex() == "\\section{Section 1}\n\nSome text...\n\n"


def test_empty_part_renders_nothing() -> None:
    assert Document(DocumentClass.PART).to_latex() == ""


def test_environment_string_is_one_line() -> None:
    environment = Environment("center", "centered text")

    assert environment.lines == ["centered text"]


def test_environment_rejects_non_text_lines() -> None:
    with pytest.raises(InvalidNodeError):
        Environment("center", [1])  # type: ignore[list-item]
    with pytest.raises(InvalidNodeError):
        Environment("center").push(1)  # type: ignore[arg-type]
