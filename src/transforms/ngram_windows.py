"""N-gram window extraction.

Model data is trained on space-padded words, so windows of order two and
three see a token as if it had one space on each side. The padding is
synthesized per window instead of copying the token.
"""

from __future__ import annotations

from typing import Iterator

from core.constants import MAX_NGRAM_ORDER, MIN_NGRAM_ORDER, PAD_CODE_UNIT
from core.errors import LangDetectContractError
from core.types import WideToken


def next_window(token: WideToken, order: int, offset: int) -> tuple[str, int] | None:
    """Return the window starting at ``offset`` and the offset after it.

    For order 1 the windows are the code units themselves. For higher orders
    offset ``k`` addresses position ``k`` of the padded token, so offset 0
    starts with the leading space and the window ending on the last code unit
    gets a trailing space.

    Args:
        token: Converted word.
        order: N-gram order in {1, 2, 3}.
        offset: Window start position.

    Returns:
        ``(window, next_offset)``, or None once the token is exhausted.

    Raises:
        LangDetectContractError: If ``order`` or ``offset`` is out of range.
    """
    _check_order(order)
    if offset < 0:
        raise LangDetectContractError(f"Window offset must be non-negative, got {offset}.")
    text = token.text
    length = len(text)
    if length == 0:
        return None
    if order == 1:
        if offset >= length:
            return None
        return text[offset], offset + 1
    # Padded token length is length + 2.
    if offset + order > length + 2:
        return None
    if offset == 0:
        window = PAD_CODE_UNIT + text[: order - 1]
        if len(window) < order:
            window += PAD_CODE_UNIT
    elif offset + order == length + 2:
        window = text[offset - 1 :] + PAD_CODE_UNIT
    else:
        window = text[offset - 1 : offset - 1 + order]
    return window, offset + 1


def iter_windows(token: WideToken, order: int) -> Iterator[str]:
    """Yield every window of ``token`` for ``order`` until exhaustion."""
    offset = 0
    while True:
        step = next_window(token, order, offset)
        if step is None:
            return
        window, offset = step
        yield window


def _check_order(order: int) -> None:
    if not MIN_NGRAM_ORDER <= order <= MAX_NGRAM_ORDER:
        raise LangDetectContractError(
            f"Unsupported n-gram order {order}: expected {MIN_NGRAM_ORDER}..{MAX_NGRAM_ORDER}."
        )
