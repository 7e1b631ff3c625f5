from __future__ import annotations

from pydantic import ValidationError
import pytest

from latexdom.core.config import DEFAULT_SETTINGS, RenderSettings


def test_defaults() -> None:
    settings = RenderSettings()

    assert settings.depth_policy == "clamp"
    assert settings.legacy_latex_accents is False
    assert settings.section_labels is False
    assert settings.label_prefix == "sec:"
    assert settings == DEFAULT_SETTINGS


def test_from_mapping_validates_values() -> None:
    settings = RenderSettings.from_mapping({"depth_policy": "error", "label_prefix": " s: "})

    assert settings.depth_policy == "error"
    assert settings.label_prefix == "s:"
    assert RenderSettings.from_mapping(None) == RenderSettings()


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        RenderSettings.from_mapping({"depth": 4})


def test_invalid_policy_is_rejected() -> None:
    with pytest.raises(ValidationError):
        RenderSettings(depth_policy="ignore")  # type: ignore[arg-type]


def test_settings_are_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_SETTINGS.section_labels = True  # type: ignore[misc]


def test_legacy_accents_setting_reaches_printer() -> None:
    from latexdom import Document

    doc = Document()
    doc.push("café")

    assert "café" in doc.to_latex()
    assert "caf\\'{e}" in doc.to_latex(settings=RenderSettings(legacy_latex_accents=True))
