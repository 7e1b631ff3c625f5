"""Escaping helpers for text placed in LaTeX source."""

from __future__ import annotations

import re
import unicodedata

from pylatexenc.latexencode import unicode_to_latex


_BASIC_LATEX_ESCAPE_MAP = {
    "&": r"\&",
    "%": r"\%",
    "#": r"\#",
    "$": r"\$",
    "_": r"\_",
    "^": r"\textasciicircum{}",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "\\": r"\textbackslash{}",
}

_UNESCAPE_MAP = {escaped: char for char, escaped in _BASIC_LATEX_ESCAPE_MAP.items()}
_UNESCAPE_PATTERN = re.compile(
    "|".join(re.escape(token) for token in sorted(_UNESCAPE_MAP, key=len, reverse=True))
)

_ACCENT_NEEDS_BRACES_PATTERN = re.compile(
    r"\\([" + re.escape("`'^\"~=\\.Hrvuck") + r"])\s*([A-Za-z])(?!\{)"
)
_ACCENT_CONTROL_TARGET_PATTERN = re.compile(
    r"\\([" + re.escape("`'^\"~=\\.Hrvuck") + r"])\s*(\\[ij])"
)


def _wrap_latex_output(payload: str) -> str:
    """Ensure accent macros wrap their payload in braces."""

    def _repl(match: re.Match[str]) -> str:
        command, char = match.groups()
        return f"\\{command}{{{char}}}"

    payload = _ACCENT_NEEDS_BRACES_PATTERN.sub(_repl, payload)

    def _repl_control(match: re.Match[str]) -> str:
        command, control = match.groups()
        return f"\\{command}{{{control}}}"

    return _ACCENT_CONTROL_TARGET_PATTERN.sub(_repl_control, payload)


def _should_skip_encoding(char: str) -> bool:
    try:
        name = unicodedata.name(char)
    except ValueError:
        return False
    if "SUPERSCRIPT" in name or "SUBSCRIPT" in name:
        return True
    return "MODIFIER LETTER" in name and ("SMALL" in name or "CAPITAL" in name)


def escape_latex_chars(text: str, *, legacy_accents: bool = False) -> str:
    """Escape LaTeX special characters in a single left-to-right pass.

    Replacement sequences are never rescanned, so escaping twice is not the
    identity. With ``legacy_accents`` enabled, non-ASCII characters are also
    converted to legacy LaTeX macros through pylatexenc.
    """
    if not text:
        return text
    if not legacy_accents:
        return "".join(_BASIC_LATEX_ESCAPE_MAP.get(char, char) for char in text)

    parts: list[str] = []
    buffer: list[str] = []

    def _encode_chunk(chunk: str) -> str:
        escaped = "".join(_BASIC_LATEX_ESCAPE_MAP.get(char, char) for char in chunk)
        encoded = unicode_to_latex(escaped, non_ascii_only=True, unknown_char_warning=False)
        return _wrap_latex_output(encoded)

    for char in text:
        if _should_skip_encoding(char):
            if buffer:
                parts.append(_encode_chunk("".join(buffer)))
                buffer.clear()
            parts.append(char)
        else:
            buffer.append(char)

    if buffer:
        parts.append(_encode_chunk("".join(buffer)))

    return "".join(parts)


def unescape_latex_chars(text: str) -> str:
    """Reverse :func:`escape_latex_chars` for output produced without legacy accents."""
    if not text:
        return text
    return _UNESCAPE_PATTERN.sub(lambda match: _UNESCAPE_MAP[match.group(0)], text)


escape = escape_latex_chars


__all__ = ["escape", "escape_latex_chars", "unescape_latex_chars"]
