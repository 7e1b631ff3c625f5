"""Configuration model used by the LaTeX printer.

RenderSettings

`depth_policy` (`"clamp" | "error"`)
: Behaviour when sections nest deeper than ``\\subsubsection``. ``"clamp"``
  reuses the deepest sectioning command and reports a
  ``section_depth_clamped`` diagnostic; ``"error"`` aborts the render with
  :class:`~latexdom.core.exceptions.StructuralError`.

`legacy_latex_accents` (`bool`)
: When `True`, escape accented characters, ligatures, and typographic punctuation
  using legacy LaTeX macros. When `False`, keep Unicode glyphs compatible with
  LuaLaTeX/XeLaTeX (default).

`section_labels` (`bool`)
: Attach a ``\\label`` derived from the section name to every section that
  has no explicit label.

`label_prefix` (`str`)
: Prefix prepended to generated section labels.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


MAX_SECTION_DEPTH = 2


class RenderSettings(BaseModel):
    """Knobs influencing how a document tree is printed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    depth_policy: Literal["clamp", "error"] = Field(
        default="clamp", description="Policy for sections nested beyond the deepest command"
    )
    legacy_latex_accents: bool = False
    section_labels: bool = False
    label_prefix: str = "sec:"

    @field_validator("label_prefix", mode="before")
    @classmethod
    def _coerce_prefix(cls, value: Any) -> str:
        if value is None:
            return ""
        candidate = value if isinstance(value, str) else str(value)
        return candidate.strip()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> RenderSettings:
        """Validate user supplied settings, falling back to defaults."""
        if not data:
            return cls()
        return cls.model_validate(dict(data))


DEFAULT_SETTINGS = RenderSettings()


__all__ = ["DEFAULT_SETTINGS", "MAX_SECTION_DEPTH", "RenderSettings"]
