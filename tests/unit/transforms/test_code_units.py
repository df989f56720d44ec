"""Unit tests for code-unit conversion."""

from __future__ import annotations

import pytest

from core.errors import CodeUnitConversionError, LangDetectConfigError
from core.types import Token
from transforms.code_units import CodeUnitConverter


def test_to_wide_decodes_multibyte_text() -> None:
    """Each decoded character should be one code unit."""
    wide = CodeUnitConverter().to_wide(Token(data="привет".encode("utf-8")))

    assert wide.text == "привет" and len(wide) == 6


def test_to_wide_preserves_flags() -> None:
    """Token flags should pass through conversion unchanged."""
    wide = CodeUnitConverter().to_wide(Token(data=b"word", flags=0b101))

    assert wide.flags == 0b101


def test_to_wide_returns_empty_token_for_malformed_input() -> None:
    """Malformed UTF-8 should degrade to a zero-length token."""
    wide = CodeUnitConverter().to_wide(Token(data=b"\xff\xfeabc", flags=3))

    assert len(wide) == 0 and wide.flags == 3


def test_decode_raises_for_malformed_input() -> None:
    """Direct decoding should signal the conversion failure."""
    with pytest.raises(CodeUnitConversionError):
        CodeUnitConverter().decode(b"\xc3")


def test_converter_rejects_unknown_encoding() -> None:
    """Unknown codec names are a configuration error."""
    with pytest.raises(LangDetectConfigError):
        CodeUnitConverter("no-such-encoding")


def test_to_wide_many_keeps_order() -> None:
    """Batch conversion should align to input order."""
    tokens = [Token(data=b"one"), Token(data=b"\x80"), Token(data=b"two")]

    wide_tokens = CodeUnitConverter().to_wide_many(tokens)

    assert [token.text for token in wide_tokens] == ["one", "", "two"]
