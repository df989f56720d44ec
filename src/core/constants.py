"""Core constants used across lingram modules.

This module centralizes defaults and fixed values of the detector.
Keeping values here avoids magic literals in scoring logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_LANGUAGES_PATH = Path("/usr/share/lingram/languages")
DEFAULT_SHORT_TEXT_LIMIT = 200
DEFAULT_SAMPLE_WORDS = 20
DEFAULT_TEXT_ENCODING = "utf-8"
MODEL_FILE_PATTERN = "*.json"
MODEL_FREQ_KEY = "freq"
CONFIG_SECTION_NAME = "lang_detection"
UNKNOWN_LANGUAGE_CODE = "unknown"
PAD_CODE_UNIT = " "
MIN_NGRAM_ORDER = 1
MAX_NGRAM_ORDER = 3
SHORT_TEXT_ORDERS = (3,)
LONG_TEXT_ORDERS = (1, 2, 3)
