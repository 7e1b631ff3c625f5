"""Tree walkers: the base visitor, the LaTeX printer, and the outline collector."""

from __future__ import annotations

from .base import Visitor, nesting_guard
from .outline import OutlineCollector, OutlineEntry, collect_outline
from .printer import SECTION_COMMANDS, Printer, render_to_string


__all__ = [
    "SECTION_COMMANDS",
    "OutlineCollector",
    "OutlineEntry",
    "Printer",
    "Visitor",
    "nesting_guard",
    "collect_outline",
    "render_to_string",
]
