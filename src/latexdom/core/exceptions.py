"""Exception hierarchy for building and rendering LaTeX document trees."""

from __future__ import annotations


class LatexRenderingError(RuntimeError):
    """Base exception for every failure raised by latexdom."""


class RenderError(LatexRenderingError):
    """Raised when a render call cannot complete."""


class SinkFailureError(RenderError):
    """Raised when the output sink rejects a write.

    The exception reported by the sink is available as ``__cause__``.
    """


class StructuralError(RenderError):
    """Raised when the tree shape cannot be expressed in LaTeX."""


class InvalidNodeError(LatexRenderingError, TypeError):
    """Raised when a value that is not a document element enters the tree."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "InvalidNodeError",
    "LatexRenderingError",
    "RenderError",
    "SinkFailureError",
    "StructuralError",
    "exception_hint",
    "exception_messages",
]
