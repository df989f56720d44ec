"""Language detection transform.

This module drives the scoring engine over a whole document and picks
the winning language. Short documents are scored word by word at trigram
order. Long documents are reduced to a stratified random sample whose
words are scored at unigram, bigram, then trigram order.
"""

from __future__ import annotations

import random
from typing import Iterable, Sequence

from core.constants import DEFAULT_SAMPLE_WORDS, LONG_TEXT_ORDERS, SHORT_TEXT_ORDERS
from core.errors import LangDetectContractError
from core.logging_config import get_logger
from core.types import LanguageVerdict, WideToken
from store.profile_store import ProfileStore
from transforms.candidate_scoring import CandidateScorer

logger = get_logger(__name__)


class LanguageDetector:
    """Detect document languages against a loaded profile store.

    Args:
        store: Loaded profiles; shared read-only between detectors.
        sample_words: Number of words sampled from long documents.
        rng: Random source for sampling; a fresh unseeded one by default.
    """

    def __init__(
        self,
        store: ProfileStore,
        sample_words: int = DEFAULT_SAMPLE_WORDS,
        rng: random.Random | None = None,
    ) -> None:
        if sample_words < 1:
            raise LangDetectContractError(f"sample_words must be positive, got {sample_words}.")
        self.store = store
        self.sample_words = sample_words
        self._rng = rng or random.Random()

    def detect(
        self, tokens: Sequence[WideToken], word_count: int | None = None
    ) -> LanguageVerdict | None:
        """Detect the language of a tokenized document.

        Args:
            tokens: Converted words of the document.
            word_count: Total word count of the document; ``len(tokens)`` by default.

        Returns:
            Verdict for the best-scoring language, or None when nothing scored.
        """
        total_words = len(tokens) if word_count is None else word_count
        if not tokens:
            return None
        sampled = total_words >= self.store.short_text_limit
        if sampled:
            wanted = min(self.sample_words, len(tokens))
            words = [tokens[offset] for offset in select_sample(tokens, wanted, self._rng)]
            orders = LONG_TEXT_ORDERS
        else:
            words = list(tokens)
            orders = SHORT_TEXT_ORDERS
        scorer = CandidateScorer(self.store)
        for order in orders:
            for word in words:
                scorer.score_word(word, order)
        ranking = [candidate for candidate in scorer.ranking() if candidate.score > 0]
        if not ranking:
            logger.debug("language_undetected", words=len(words), sampled=sampled)
            return None
        winner = ranking[0]
        logger.debug(
            "language_detected",
            language=winner.language,
            score=winner.score,
            candidates=len(ranking),
            sampled=sampled,
        )
        return LanguageVerdict(
            language=winner.language,
            score=winner.score,
            ranking=tuple((candidate.language, candidate.score) for candidate in ranking),
            words_scored=len(words),
            sampled=sampled,
        )

    def detect_many(
        self, documents: Iterable[Sequence[WideToken]]
    ) -> list[LanguageVerdict | None]:
        """Detect languages for multiple documents, aligned to input order."""
        return [self.detect(tokens) for tokens in documents]


def select_sample(
    tokens: Sequence[object], wanted_count: int, rng: random.Random | None = None
) -> list[int]:
    """Pick one random offset from each of ``wanted_count`` contiguous segments.

    The first segment absorbs the remainder of an uneven split, e.g. 10
    tokens in 3 segments gives ``[0, 4)``, ``[4, 7)`` and ``[7, 10)``.
    Spreading picks over the whole document favours topical diversity
    over strict uniformity.

    Args:
        tokens: Document tokens.
        wanted_count: Number of offsets to return.
        rng: Random source; the module-level generator by default.

    Returns:
        Ascending token offsets, one per segment.

    Raises:
        LangDetectContractError: If fewer tokens than ``wanted_count`` exist.
    """
    if wanted_count <= 0:
        raise LangDetectContractError(f"wanted_count must be positive, got {wanted_count}.")
    if len(tokens) < wanted_count:
        raise LangDetectContractError(
            f"Cannot sample {wanted_count} words from {len(tokens)} tokens."
        )
    source = rng or random
    step_len, remainder = divmod(len(tokens), wanted_count)
    offsets = [source.randrange(step_len + remainder)]
    for start in range(step_len + remainder, len(tokens), step_len):
        offsets.append(start + source.randrange(step_len))
    return offsets
