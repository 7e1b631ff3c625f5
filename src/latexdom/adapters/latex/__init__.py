"""LaTeX specific helpers."""

from __future__ import annotations

from .utils import escape, escape_latex_chars, unescape_latex_chars


__all__ = ["escape", "escape_latex_chars", "unescape_latex_chars"]
