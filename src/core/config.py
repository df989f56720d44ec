"""Runtime configuration model for lingram.

This module owns environment variable and YAML config parsing.
Other modules consume a typed config object instead of raw values.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.constants import (
    CONFIG_SECTION_NAME,
    DEFAULT_LANGUAGES_PATH,
    DEFAULT_SAMPLE_WORDS,
    DEFAULT_SHORT_TEXT_LIMIT,
)
from core.errors import LangDetectConfigError

_SECTION_KEYS = ("languages_path", "languages", "short_text_limit", "sample_words", "random_seed")


@dataclass(frozen=True)
class DetectorConfig:
    """Validated detector configuration.

    Attributes:
        languages_path: Directory holding ``<lang>.json`` model files.
        short_text_limit: Word count below which every word is scored at trigram order.
        sample_words: Number of words sampled from long documents.
        random_seed: Optional seed for reproducible sampling.
    """

    languages_path: Path = DEFAULT_LANGUAGES_PATH
    short_text_limit: int = DEFAULT_SHORT_TEXT_LIMIT
    sample_words: int = DEFAULT_SAMPLE_WORDS
    random_seed: int | None = None

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LangDetectConfigError: If environment values are invalid.
        """
        languages_path = os.getenv("LINGRAM_LANGUAGES_PATH", str(DEFAULT_LANGUAGES_PATH))
        short_text_limit = _parse_int_env("LINGRAM_SHORT_TEXT_LIMIT", DEFAULT_SHORT_TEXT_LIMIT)
        sample_words = _parse_int_env("LINGRAM_SAMPLE_WORDS", DEFAULT_SAMPLE_WORDS)
        raw_seed = os.getenv("LINGRAM_RANDOM_SEED")
        random_seed = None if raw_seed is None else _parse_int("LINGRAM_RANDOM_SEED", raw_seed)
        return cls.from_values(
            languages_path=languages_path,
            short_text_limit=short_text_limit,
            sample_words=sample_words,
            random_seed=random_seed,
        )

    @classmethod
    def from_values(
        cls,
        languages_path: str | Path,
        short_text_limit: int,
        sample_words: int,
        random_seed: int | None,
    ) -> "DetectorConfig":
        """Build a config after range checks.

        Raises:
            LangDetectConfigError: If a numeric value is out of range.
        """
        if short_text_limit < 0:
            raise LangDetectConfigError(
                f"Invalid short_text_limit {short_text_limit}: expected a non-negative integer."
            )
        if sample_words < 1:
            raise LangDetectConfigError(
                f"Invalid sample_words {sample_words}: expected a positive integer."
            )
        return cls(
            languages_path=Path(languages_path).expanduser(),
            short_text_limit=short_text_limit,
            sample_words=sample_words,
            random_seed=random_seed,
        )


def load_detector_config(config_path: str | Path) -> DetectorConfig:
    """Load detector settings from the ``lang_detection`` section of a YAML file.

    Missing keys keep their defaults; a file without the section yields the
    default config.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Validated detector config.

    Raises:
        LangDetectConfigError: If the file is unreadable or holds invalid values.
    """
    config_file = Path(config_path).expanduser()
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise LangDetectConfigError(
            f"Failed to read config at {config_file}: {error}. Check the path and retry."
        ) from error
    except yaml.YAMLError as error:
        raise LangDetectConfigError(
            f"Failed to parse YAML config at {config_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return DetectorConfig()
    if not isinstance(payload, Mapping):
        raise LangDetectConfigError(
            f"Invalid config root in {config_file}: expected mapping, got {type(payload).__name__}."
        )
    section = payload.get(CONFIG_SECTION_NAME)
    if section is None:
        return DetectorConfig()
    if not isinstance(section, Mapping):
        raise LangDetectConfigError(
            f"Invalid '{CONFIG_SECTION_NAME}' section: expected mapping, "
            f"got {type(section).__name__}."
        )
    return config_from_mapping(section)


def config_from_mapping(section: Mapping[str, object]) -> DetectorConfig:
    """Build config from a parsed ``lang_detection`` mapping.

    Raises:
        LangDetectConfigError: If keys are unknown or values have the wrong type.
    """
    unknown_keys = sorted(str(key) for key in section if key not in _SECTION_KEYS)
    if unknown_keys:
        raise LangDetectConfigError(
            f"Unsupported {CONFIG_SECTION_NAME} keys: {unknown_keys}. "
            f"Supported keys: {list(_SECTION_KEYS)}."
        )
    raw_path = section.get("languages_path", section.get("languages"))
    if raw_path is None:
        languages_path: str | Path = DEFAULT_LANGUAGES_PATH
    elif isinstance(raw_path, str):
        languages_path = raw_path
    else:
        raise LangDetectConfigError(
            f"Invalid languages_path: expected string, got {type(raw_path).__name__}."
        )
    raw_seed = section.get("random_seed")
    return DetectorConfig.from_values(
        languages_path=languages_path,
        short_text_limit=_expect_int(section, "short_text_limit", DEFAULT_SHORT_TEXT_LIMIT),
        sample_words=_expect_int(section, "sample_words", DEFAULT_SAMPLE_WORDS),
        random_seed=None if raw_seed is None else _expect_int(section, "random_seed", 0),
    )


def _expect_int(section: Mapping[str, object], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise LangDetectConfigError(f"Invalid {key}: expected integer, got {value!r}.")
    return value


def _parse_int_env(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return _parse_int(name, raw_value)


def _parse_int(name: str, raw_value: str) -> int:
    """Parse an integer environment value.

    Raises:
        LangDetectConfigError: If value cannot be parsed into int.
    """
    try:
        return int(raw_value)
    except ValueError as error:
        raise LangDetectConfigError(
            f"Invalid {name} value: expected integer, got '{raw_value}'. "
            f"Set {name} to a numeric value."
        ) from error
