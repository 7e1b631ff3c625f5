"""Collect the section outline of a document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import Visitor, nesting_guard


if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..model.document import Document
    from ..model.section import Section


@dataclass(frozen=True, slots=True)
class OutlineEntry:
    """Heading metadata in document order; ``level`` 0 is a top-level section."""

    level: int
    title: str
    label: str | None = None


class OutlineCollector(Visitor):
    """Visitor recording every section it meets."""

    def __init__(self) -> None:
        self.entries: list[OutlineEntry] = []

    def visit_section(self, section: Section, depth: int) -> None:
        self.entries.append(OutlineEntry(level=depth, title=section.name, label=section.label))
        super().visit_section(section, depth)


def collect_outline(document: Document) -> list[OutlineEntry]:
    collector = OutlineCollector()
    with nesting_guard():
        collector.visit_document(document)
    return collector.entries


__all__ = ["OutlineCollector", "OutlineEntry", "collect_outline"]
