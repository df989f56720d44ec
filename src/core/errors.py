"""Lingram exception hierarchy.

Configuration failures surface to the initializer's caller, per-file and
per-token failures are recoverable, and contract errors mark caller bugs.
"""

from __future__ import annotations


class LangDetectError(Exception):
    """Base exception for all lingram failures."""


class LangDetectConfigError(LangDetectError):
    """Raised for invalid configuration or an unusable model directory."""


class ProfileLoadError(LangDetectError):
    """Raised when a single model file cannot be parsed."""


class CodeUnitConversionError(LangDetectError):
    """Raised when token bytes cannot be decoded into code units."""


class LangDetectContractError(LangDetectError):
    """Raised when a caller violates an API precondition."""
