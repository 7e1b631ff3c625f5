"""The renderable capability shared by every node of the document tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..core.config import RenderSettings
    from ..core.diagnostics import DiagnosticEmitter
    from ..core.sink import TextSink


@runtime_checkable
class Renderable(Protocol):
    """Anything able to write its LaTeX representation into a sink."""

    def render(
        self,
        sink: TextSink,
        *,
        settings: RenderSettings | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None: ...


class RenderableElement:
    """Mixin routing ``render`` through the printer for body elements."""

    __slots__ = ()

    def render(
        self,
        sink: TextSink,
        *,
        settings: RenderSettings | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        """Write this element, as if it were a top-level body element, to ``sink``."""
        from ..visitor.printer import Printer

        Printer(sink, settings=settings, emitter=emitter).render_element(self)  # type: ignore[arg-type]


__all__ = ["Renderable", "RenderableElement"]
