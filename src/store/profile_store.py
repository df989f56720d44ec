"""Language profile store.

This module loads per-language n-gram frequency models from a directory
of ``<lang>.json`` files. Each file holds a ``freq`` object mapping keys of
one to three characters onto integer frequencies. Loading is tolerant:
a broken file or key is logged and skipped, and only an unusable
directory is a configuration error.

Profiles are immutable after load and can be shared across threads.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from core.constants import MODEL_FILE_PATTERN, MODEL_FREQ_KEY
from core.errors import (
    CodeUnitConversionError,
    LangDetectConfigError,
    LangDetectContractError,
    ProfileLoadError,
)
from core.logging_config import get_logger
from transforms.code_units import CodeUnitConverter

logger = get_logger(__name__)


@dataclass(frozen=True)
class LanguageProfile:
    """Frequency tables of one language.

    Attributes:
        name: Short language code such as ``en``.
        unigrams: Frequencies of single code units.
        bigrams: Frequencies of two-code-unit keys.
        trigrams: Frequencies of three-code-unit keys.
    """

    name: str
    unigrams: Mapping[str, int]
    bigrams: Mapping[str, int]
    trigrams: Mapping[str, int]
    unigram_total: int
    bigram_total: int
    trigram_total: int

    def table(self, order: int) -> Mapping[str, int]:
        """Return the frequency table for an n-gram order in {1, 2, 3}."""
        return (self.unigrams, self.bigrams, self.trigrams)[_order_index(order)]

    def total(self, order: int) -> int:
        return (self.unigram_total, self.bigram_total, self.trigram_total)[_order_index(order)]

    def frequency(self, window: str, order: int) -> int:
        return self.table(order).get(window, 0)


class ProfileStore:
    """Ordered, read-only collection of language profiles."""

    def __init__(
        self,
        profiles: tuple[LanguageProfile, ...],
        short_text_limit: int,
        converter: CodeUnitConverter,
    ) -> None:
        self._profiles = profiles
        self._by_name = MappingProxyType({profile.name: profile for profile in profiles})
        self.short_text_limit = short_text_limit
        self.converter = converter

    @property
    def profiles(self) -> tuple[LanguageProfile, ...]:
        return self._profiles

    def get(self, name: str) -> LanguageProfile | None:
        return self._by_name.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(profile.name for profile in self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[LanguageProfile]:
        return iter(self._profiles)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def load_profile_store(
    languages_path: str | Path,
    short_text_limit: int,
    converter: CodeUnitConverter | None = None,
) -> ProfileStore:
    """Load every model file of a directory into a profile store.

    Args:
        languages_path: Directory containing ``*.json`` model files.
        short_text_limit: Word-count threshold kept on the store.
        converter: Converter for model keys; a UTF-8 converter by default.

    Returns:
        Store with profiles in sorted file order.

    Raises:
        LangDetectConfigError: If the directory is missing or holds no model files.
    """
    directory = Path(languages_path).expanduser()
    if not directory.is_dir():
        raise LangDetectConfigError(
            f"Languages path {directory} is not a directory. "
            "Set languages_path to the directory holding model files."
        )
    model_paths = sorted(
        path for path in directory.glob(MODEL_FILE_PATTERN) if not path.name.startswith(".")
    )
    if not model_paths:
        raise LangDetectConfigError(
            f"Cannot read any files matching {directory / MODEL_FILE_PATTERN}."
        )
    key_converter = converter or CodeUnitConverter()
    profiles: list[LanguageProfile] = []
    seen_names: set[str] = set()
    for model_path in model_paths:
        try:
            profile = load_profile(model_path, key_converter)
        except ProfileLoadError as error:
            logger.warning("language_profile_skipped", path=str(model_path), reason=str(error))
            continue
        if profile.name in seen_names:
            logger.warning(
                "language_profile_duplicate", path=str(model_path), language=profile.name
            )
            continue
        seen_names.add(profile.name)
        profiles.append(profile)
    logger.info("language_profiles_loaded", count=len(profiles), path=str(directory))
    return ProfileStore(tuple(profiles), short_text_limit, key_converter)


def load_profile(model_path: Path, converter: CodeUnitConverter) -> LanguageProfile:
    """Parse one model file into a language profile.

    Args:
        model_path: Path to a ``<lang>.json`` file.
        converter: Converter applied to every frequency key.

    Returns:
        Loaded profile.

    Raises:
        ProfileLoadError: If the file is unreadable, malformed, or lacks ``freq``.
        LangDetectContractError: If the path has no name component.
    """
    name = language_name_from_path(model_path)
    try:
        payload = json.loads(model_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        raise ProfileLoadError(f"cannot parse file {model_path}: {error}") from error
    freqs = payload.get(MODEL_FREQ_KEY) if isinstance(payload, dict) else None
    if not isinstance(freqs, dict):
        raise ProfileLoadError(f"file {model_path} has no '{MODEL_FREQ_KEY}' object")
    tables: tuple[dict[str, int], ...] = ({}, {}, {})
    for raw_key, raw_freq in freqs.items():
        if isinstance(raw_freq, bool) or not isinstance(raw_freq, int) or raw_freq < 0:
            logger.warning(
                "language_key_invalid_frequency", language=name, key=raw_key, value=raw_freq
            )
            continue
        try:
            key = converter.decode(raw_key.encode("utf-8"))
        except (CodeUnitConversionError, UnicodeEncodeError) as error:
            logger.warning("language_key_unconvertible", language=name, reason=str(error))
            continue
        if len(key) > len(tables):
            logger.warning("language_key_too_long", language=name, length=len(key))
            continue
        if not key:
            continue
        tables[len(key) - 1][key] = raw_freq
    unigrams, bigrams, trigrams = tables
    logger.info(
        "language_profile_loaded",
        language=name,
        unigrams=len(unigrams),
        bigrams=len(bigrams),
        trigrams=len(trigrams),
    )
    return LanguageProfile(
        name=name,
        unigrams=MappingProxyType(unigrams),
        bigrams=MappingProxyType(bigrams),
        trigrams=MappingProxyType(trigrams),
        unigram_total=sum(unigrams.values()),
        bigram_total=sum(bigrams.values()),
        trigram_total=sum(trigrams.values()),
    )


def language_name_from_path(model_path: Path) -> str:
    """Return the file base name up to the first ``.``.

    Raises:
        LangDetectContractError: If the path has no name component.
    """
    name = model_path.name.split(".", 1)[0]
    if not name:
        raise LangDetectContractError(f"Model path {model_path} has no language name component.")
    return name


def _order_index(order: int) -> int:
    if order not in (1, 2, 3):
        raise LangDetectContractError(f"Unsupported n-gram order {order}: expected 1, 2 or 3.")
    return order - 1
