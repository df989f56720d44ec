"""Code-unit conversion for word tokens.

Tokens arrive from the pipeline as raw bytes. Windowing needs a
fixed-width representation, so bytes are decoded into ``str`` where every
character is one code unit and can be sliced by position.
"""

from __future__ import annotations

import codecs
from typing import Iterable

from core.constants import DEFAULT_TEXT_ENCODING
from core.errors import CodeUnitConversionError, LangDetectConfigError
from core.logging_config import get_logger
from core.types import Token, WideToken

logger = get_logger(__name__)


class CodeUnitConverter:
    """Stateless decoder from token bytes to code units.

    Each call decodes its input in one shot, so a single instance can be
    shared by concurrent detection requests.
    """

    def __init__(self, encoding: str = DEFAULT_TEXT_ENCODING) -> None:
        try:
            self._codec = codecs.lookup(encoding)
        except LookupError as error:
            raise LangDetectConfigError(
                f"Unknown text encoding '{encoding}'. Use a codec name such as 'utf-8'."
            ) from error

    @property
    def encoding(self) -> str:
        return self._codec.name

    def decode(self, data: bytes) -> str:
        """Decode raw bytes into code units.

        Args:
            data: Encoded text.

        Returns:
            Decoded text.

        Raises:
            CodeUnitConversionError: If ``data`` is malformed for the encoding.
        """
        try:
            text, _ = self._codec.decode(data, "strict")
        except UnicodeDecodeError as error:
            raise CodeUnitConversionError(
                f"Cannot convert {len(data)} bytes from {self.encoding}: {error.reason}"
            ) from error
        return text

    def to_wide(self, token: Token) -> WideToken:
        """Convert a byte token, degrading to an empty token on bad input.

        Args:
            token: Byte-level token from the tokenizer.

        Returns:
            Wide token with the same flags; zero-length when decoding failed.
        """
        try:
            text = self.decode(token.data)
        except CodeUnitConversionError as error:
            logger.debug("token_conversion_failed", reason=str(error), flags=token.flags)
            text = ""
        return WideToken(text=text, flags=token.flags)

    def to_wide_many(self, tokens: Iterable[Token]) -> list[WideToken]:
        return [self.to_wide(token) for token in tokens]
