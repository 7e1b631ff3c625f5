"""Itemized and enumerated lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from ..core.exceptions import InvalidNodeError
from .base import RenderableElement


class ListKind(str, Enum):
    """Which list environment is emitted."""

    ENUMERATE = "enumerate"
    """A numbered list."""

    ITEMIZE = "itemize"
    """A bullet list."""

    @property
    def environment_name(self) -> str:
        return self.value


@dataclass(slots=True)
class List(RenderableElement):
    """A flat list of raw-text items, escaped at render time."""

    kind: ListKind = ListKind.ITEMIZE
    items: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.kind = ListKind(self.kind)
        if isinstance(self.items, str):
            self.items = [self.items]
        else:
            self.items = [_as_item(item) for item in self.items]

    @classmethod
    def of(cls, kind: ListKind, items: Iterable[str]) -> List:
        return cls(kind, list(items))

    def push(self, item: str) -> List:
        """Append an item and return the list for chaining."""
        self.items.append(_as_item(item))
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _as_item(value: object) -> str:
    if not isinstance(value, str):
        raise InvalidNodeError(f"List items must be text, not {type(value).__name__!r}")
    return value


__all__ = ["List", "ListKind"]
