from __future__ import annotations

# Minimal document: title page, table of contents, and two sections.
import sys

from latexdom import ClearPage, Document, DocumentClass, Section, TableOfContents, TitlePage


def build_document() -> Document:
    """Assemble a small article with two sections."""
    doc = Document(DocumentClass.ARTICLE)
    doc.preamble.set_title("My Fancy Document").set_author("Michael-F-Bryan")

    doc.push(TitlePage()).push(ClearPage()).push(TableOfContents()).push(ClearPage())

    for name in ("Section 1", "Section 2"):
        section = Section(name)
        section.push("lorem ipsum...")
        doc.push(section)

    return doc


def main() -> None:
    build_document().render(sys.stdout)


if __name__ == "__main__":
    main()
