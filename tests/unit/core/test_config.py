"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import DetectorConfig, config_from_mapping, load_detector_config
from core.constants import DEFAULT_SAMPLE_WORDS, DEFAULT_SHORT_TEXT_LIMIT
from core.errors import LangDetectConfigError
from tests.fixture_paths import fixture_path


def test_from_env_reads_languages_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the model directory from environment."""
    monkeypatch.setenv("LINGRAM_LANGUAGES_PATH", "./models/languages")

    config = DetectorConfig.from_env()

    assert config.languages_path.name == "languages"


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should keep default limits and no seed."""
    for name in ("LINGRAM_SHORT_TEXT_LIMIT", "LINGRAM_SAMPLE_WORDS", "LINGRAM_RANDOM_SEED"):
        monkeypatch.delenv(name, raising=False)

    config = DetectorConfig.from_env()

    assert (config.short_text_limit, config.sample_words, config.random_seed) == (
        DEFAULT_SHORT_TEXT_LIMIT,
        DEFAULT_SAMPLE_WORDS,
        None,
    )


def test_from_env_raises_for_invalid_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric short-text limit."""
    monkeypatch.setenv("LINGRAM_SHORT_TEXT_LIMIT", "many")

    with pytest.raises(LangDetectConfigError):
        DetectorConfig.from_env()


def test_from_values_rejects_zero_sample_words() -> None:
    """Sampling zero words is not a usable configuration."""
    with pytest.raises(LangDetectConfigError):
        DetectorConfig.from_values("/tmp", short_text_limit=10, sample_words=0, random_seed=None)


def test_load_detector_config_reads_section() -> None:
    """YAML section values should override defaults, including the languages alias."""
    config = load_detector_config(fixture_path("config/valid.yaml"))

    assert str(config.languages_path) == "/opt/lingram/languages"
    assert (config.short_text_limit, config.sample_words, config.random_seed) == (50, 10, 7)


def test_load_detector_config_without_section_returns_defaults() -> None:
    """A config file without lang_detection keeps every default."""
    config = load_detector_config(fixture_path("config/other_section.yaml"))

    assert config == DetectorConfig()


def test_load_detector_config_rejects_unknown_key() -> None:
    """Unknown section keys should be reported instead of ignored."""
    with pytest.raises(LangDetectConfigError):
        load_detector_config(fixture_path("config/unknown_key.yaml"))


def test_load_detector_config_raises_for_missing_file(tmp_path) -> None:
    """Missing config file should raise a configuration error."""
    with pytest.raises(LangDetectConfigError):
        load_detector_config(tmp_path / "missing.yaml")


def test_config_from_mapping_rejects_boolean_limit() -> None:
    """Booleans are not accepted where integers are expected."""
    with pytest.raises(LangDetectConfigError):
        config_from_mapping({"short_text_limit": True})
