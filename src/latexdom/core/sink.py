"""Output sinks accepted by the renderer.

A sink is anything exposing ``write(text)``: :class:`io.StringIO`, an open
text file, or one of the adapters below. The printer only ever appends.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Append-only destination for rendered LaTeX text."""

    def write(self, text: str, /) -> object: ...


class StringSink:
    """In-memory sink collecting chunks until :meth:`getvalue` is called."""

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> int:
        self._chunks.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self._chunks)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)


class BinarySink:
    """Encode rendered text onto a binary stream."""

    def __init__(self, stream: BinaryIO, *, encoding: str = "utf-8") -> None:
        self.stream = stream
        self.encoding = encoding

    def write(self, text: str) -> int:
        return self.stream.write(text.encode(self.encoding))


__all__ = ["BinarySink", "StringSink", "TextSink"]
