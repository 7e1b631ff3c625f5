"""Core primitives shared by the document model and the printer."""

from __future__ import annotations

from .config import DEFAULT_SETTINGS, MAX_SECTION_DEPTH, RenderSettings
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    InvalidNodeError,
    LatexRenderingError,
    RenderError,
    SinkFailureError,
    StructuralError,
)
from .sink import BinarySink, StringSink, TextSink


__all__ = [
    "DEFAULT_SETTINGS",
    "MAX_SECTION_DEPTH",
    "BinarySink",
    "DiagnosticEmitter",
    "InvalidNodeError",
    "LatexRenderingError",
    "LoggingEmitter",
    "NullEmitter",
    "RenderError",
    "RenderSettings",
    "SinkFailureError",
    "StringSink",
    "StructuralError",
    "TextSink",
]
