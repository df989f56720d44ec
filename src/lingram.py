"""Public SDK surface for lingram.

This module provides a stable import path for pipeline integrations.
It exposes detector initialization, token conversion, and detection.
"""

from __future__ import annotations

import random
from typing import Sequence

from core.config import DetectorConfig, load_detector_config
from core.errors import LangDetectConfigError, LangDetectContractError
from core.logging_config import get_logger
from core.types import LanguageVerdict, Token, WideToken
from store.profile_store import LanguageProfile, ProfileStore, load_profile_store
from transforms.code_units import CodeUnitConverter
from transforms.language_detection import LanguageDetector, select_sample

logger = get_logger(__name__)

_default_converter = CodeUnitConverter()


def initialize(config: DetectorConfig | None = None) -> LanguageDetector | None:
    """Load profiles and build a detector.

    Args:
        config: Detector settings; read from the environment when omitted.

    Returns:
        Ready detector, or None when configuration is unusable. The caller
        decides whether running without a detector is fatal.
    """
    try:
        active_config = config or DetectorConfig.from_env()
        store = load_profile_store(active_config.languages_path, active_config.short_text_limit)
    except LangDetectConfigError as error:
        logger.error("language_detector_unavailable", reason=str(error))
        return None
    rng = random.Random(active_config.random_seed)
    return LanguageDetector(store, sample_words=active_config.sample_words, rng=rng)


def to_wide(token: Token, converter: CodeUnitConverter | None = None) -> WideToken:
    """Convert a byte token into code units; empty on malformed input."""
    return (converter or _default_converter).to_wide(token)


def detect(
    detector: LanguageDetector | None,
    tokens: Sequence[WideToken],
    word_count: int | None = None,
) -> LanguageVerdict | None:
    """Detect the language of converted tokens with an initialized detector.

    Raises:
        LangDetectContractError: If ``detector`` is None.
    """
    if detector is None:
        raise LangDetectContractError("detect() called without an initialized detector.")
    return detector.detect(tokens, word_count)


__all__ = [
    "CodeUnitConverter",
    "DetectorConfig",
    "LanguageDetector",
    "LanguageProfile",
    "LanguageVerdict",
    "ProfileStore",
    "Token",
    "WideToken",
    "detect",
    "initialize",
    "load_detector_config",
    "load_profile_store",
    "select_sample",
    "to_wide",
]
