"""Unit tests for the public SDK surface."""

from __future__ import annotations

import pytest

import lingram
from core.config import DetectorConfig
from core.errors import LangDetectContractError
from core.types import Token
from tests.fixture_paths import fixture_path


def test_initialize_returns_detector_for_valid_config() -> None:
    """Initialization should load every model in the configured directory."""
    detector = lingram.initialize(DetectorConfig(languages_path=fixture_path("languages")))

    assert detector is not None and detector.store.names() == ("en", "xx")


def test_initialize_returns_none_for_empty_directory(tmp_path) -> None:
    """A model directory without files should yield no detector."""
    assert lingram.initialize(DetectorConfig(languages_path=tmp_path)) is None


def test_detect_converts_and_classifies_tokens() -> None:
    """Byte tokens converted with to_wide should be detectable end to end."""
    detector = lingram.initialize(DetectorConfig(languages_path=fixture_path("languages")))
    tokens = [lingram.to_wide(Token(data=b"the")), lingram.to_wide(Token(data=b"\xff"))]

    verdict = lingram.detect(detector, tokens, len(tokens))

    assert verdict is not None and verdict.language == "en"


def test_detect_rejects_uninitialized_detector() -> None:
    """Using a missing detector is a contract violation."""
    with pytest.raises(LangDetectContractError):
        lingram.detect(None, [])


def test_initialize_ignores_hidden_model_files(tmp_path) -> None:
    """A stray dotfile in the model directory should not break initialization."""
    (tmp_path / "en.json").write_text('{"freq": {"e": 5}}', encoding="utf-8")
    (tmp_path / ".backup.json").write_text('{"freq": {"e": 1}}', encoding="utf-8")

    detector = lingram.initialize(DetectorConfig(languages_path=tmp_path))

    assert detector is not None and detector.store.names() == ("en",)
