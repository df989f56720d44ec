"""Shared typed models.

This module defines the token, candidate, and verdict models passed
between the converter, the scoring engine, and the detector.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from store.profile_store import LanguageProfile


@dataclass(frozen=True)
class Token:
    """Byte-level word token produced by the pipeline tokenizer.

    Attributes:
        data: Raw word bytes in the pipeline text encoding.
        flags: Tokenizer flags, carried through conversion untouched.
    """

    data: bytes
    flags: int = 0

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class WideToken:
    """Word token decoded into fixed-width code units.

    Attributes:
        text: Decoded word; each character is one code unit.
        flags: Tokenizer flags copied from the source token.
    """

    text: str
    flags: int = 0

    def __len__(self) -> int:
        return len(self.text)


@dataclass
class Candidate:
    """Language scored within one detection run.

    Attributes:
        profile: Profile being scored, owned by the profile store.
        load_index: Position of the profile in load order.
        score: Accumulated frequency weight.
    """

    profile: LanguageProfile
    load_index: int
    score: int = 0

    @property
    def language(self) -> str:
        return self.profile.name


@dataclass(frozen=True)
class LanguageVerdict:
    """Final result of one detection run.

    Attributes:
        language: Winning language code.
        score: Accumulated score of the winner.
        ranking: Every scored language with its score, best first.
        words_scored: Number of words that were fed to the scoring engine.
        sampled: Whether the long-text stratified sample was used.
    """

    language: str
    score: int
    ranking: tuple[tuple[str, int], ...] = field(default_factory=tuple)
    words_scored: int = 0
    sampled: bool = False
