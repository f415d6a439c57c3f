"""Tests for language bundles and settings."""

from dataclasses import fields, replace

import pytest

from diescancalc.config.settings import Settings, DEFAULT_INPUTS
from diescancalc.exceptions.custom_exceptions import ConfigurationError
from diescancalc.i18n.bundles import BUNDLES, LANGUAGE_CHOICES, get_bundle
from diescancalc.models.data_models import Inputs, Results
from diescancalc.utils.validation import FIELD_PARSERS


@pytest.mark.parametrize("tag", sorted(BUNDLES))
def test_bundle_covers_every_field(tag):
    bundle = get_bundle(tag)
    input_names = {f.name for f in fields(Inputs)}
    output_names = {f.name for f in fields(Results)} - {"usable_px_per_cam", "cams_used"}

    assert set(bundle.prompts) == input_names
    assert set(bundle.input_labels) == input_names
    assert set(bundle.output_labels) == output_names
    assert set(bundle.tips) == output_names


@pytest.mark.parametrize("tag", sorted(BUNDLES))
def test_bundle_has_message_for_every_rule(tag):
    rules = {"positive_number", "positive_integer", "fraction", "non_negative"}
    assert set(get_bundle(tag).validation) == rules


def test_language_choices_map_to_bundles():
    assert set(LANGUAGE_CHOICES.values()) == set(BUNDLES)


def test_get_bundle_is_case_insensitive():
    assert get_bundle("TR").cancelled == "İptal edildi."


def test_unknown_language_rejected():
    with pytest.raises(ConfigurationError, match="de"):
        get_bundle("de")


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEFAULT_LANG", raising=False)
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.default_lang == "en"
    assert settings.defaults.sensor_px == 8192
    assert settings.defaults.overlap == 0.12
    assert settings.validate_settings()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEFAULT_LANG", "TR")
    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.default_lang == "tr"
    assert settings.validate_settings()


@pytest.mark.parametrize("attr, value", [
    ("log_level", "LOUD"),
    ("default_lang", "fr"),
    ("defaults", replace(DEFAULT_INPUTS, dpi=0.0)),
])
def test_settings_validation_failures(attr, value):
    settings = Settings()
    setattr(settings, attr, value)
    with pytest.raises(ConfigurationError):
        settings.validate_settings()


def test_default_inputs_cover_every_field():
    assert set(FIELD_PARSERS) == {f.name for f in fields(DEFAULT_INPUTS)}
