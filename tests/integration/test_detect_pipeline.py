"""Integration test for loading models and detecting long documents."""

from __future__ import annotations

import random
from pathlib import Path

from core.types import Token
from store.profile_store import load_profile_store
from tests.fixture_paths import write_model
from transforms.code_units import CodeUnitConverter
from transforms.language_detection import LanguageDetector


def _tokens(text: str) -> list[Token]:
    return [Token(data=word.encode("utf-8")) for word in text.split()]


def test_long_documents_are_detected_from_a_sample(tmp_path: Path) -> None:
    """Long English and Russian documents should each pick their own model."""
    write_model(
        tmp_path,
        "en",
        {"e": 120, "t": 90, "o": 80, " t": 60, "th": 70, "he": 65, " th": 90, "the": 85, "he ": 70},
    )
    write_model(
        tmp_path,
        "ru",
        {"о": 110, "е": 85, "а": 80, " п": 50, "ри": 45, "ве": 40, " пр": 60, "при": 55, "ет ": 40},
    )
    store = load_profile_store(tmp_path, short_text_limit=10)
    converter = CodeUnitConverter()
    detector = LanguageDetector(store, sample_words=5, rng=random.Random(3))
    english = converter.to_wide_many(_tokens("the other theme there then " * 6))
    russian = converter.to_wide_many(_tokens("привет при право ответ вечер " * 6))

    english_verdict = detector.detect(english, len(english))
    russian_verdict = detector.detect(russian, len(russian))

    assert english_verdict is not None and english_verdict.language == "en"
    assert russian_verdict is not None and russian_verdict.language == "ru"
    assert english_verdict.sampled and english_verdict.words_scored == 5
