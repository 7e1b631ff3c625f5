from __future__ import annotations

# Document mixing paragraphs, aligned equations, and an enumerated list.
import logging
import sys

from latexdom import (
    Align,
    ClearPage,
    Document,
    DocumentClass,
    Equation,
    List,
    ListKind,
    Paragraph,
    RenderSettings,
    Section,
    TableOfContents,
    TitlePage,
)


def first_section() -> Section:
    """Intro paragraph, some equations, then the objectives."""
    section = Section("Introduction")
    section.push("This is an example paragraph.")

    equations = Align()
    equations.push("y &= mx + c").push(Equation.with_label("quadratic", "y &= a x^2 + bx + c"))
    section.push("Please refer to the equations below:").push(equations)

    objectives = List(ListKind.ENUMERATE)
    objectives.push("Demonstrate how to use latexdom.")
    objectives.push("Create a reasonably complex document")
    objectives.push("???").push("PROFIT!")
    section.push("Here are our objectives:").push(objectives)

    details = Section("Details")
    details.push(Paragraph.from_text("Inline math such as ").math(r"e^{i\pi} + 1 = 0").push_text("."))
    section.push(details)
    return section


def build_document() -> Document:
    doc = Document(DocumentClass.ARTICLE, options={"font_size": "11pt", "paper_size": "a4paper"})
    doc.preamble.set_title("Hello World").set_author("Michael-F-Bryan")
    doc.preamble.use_package("amsmath").use_package("parskip")

    doc.push(TitlePage()).push(ClearPage()).push(TableOfContents()).push(ClearPage())
    doc.push(first_section())
    return doc


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    build_document().render(sys.stdout, settings=RenderSettings(section_labels=True))


if __name__ == "__main__":
    main()
