"""Candidate scoring engine.

Scores accumulate additively per language across every window of a run.
The first window is checked against every profile (full scan); later
windows only against the languages that already matched (incremental
update). When none of the current candidates knows a window, the engine
falls back to a full scan so a language missed early can still join.
"""

from __future__ import annotations

from core.types import Candidate, WideToken
from store.profile_store import ProfileStore
from transforms.ngram_windows import iter_windows


class CandidateScorer:
    """Per-run mapping from language name to accumulated candidate score."""

    def __init__(self, store: ProfileStore) -> None:
        self._store = store
        self._candidates: dict[str, Candidate] = {}

    @property
    def candidates(self) -> dict[str, Candidate]:
        return self._candidates

    def full_scan(self, window: str, order: int) -> int:
        """Score ``window`` against every profile in the store.

        Profiles with a non-zero frequency become candidates if they are not
        already; existing candidates get their frequency added.

        Returns:
            Sum of frequencies found across all profiles.
        """
        total = 0
        for load_index, profile in enumerate(self._store):
            freq = profile.frequency(window, order)
            candidate = self._candidates.get(profile.name)
            if candidate is None:
                if freq == 0:
                    continue
                candidate = Candidate(profile=profile, load_index=load_index)
                self._candidates[profile.name] = candidate
            candidate.score += freq
            total += freq
        return total

    def update(self, window: str, order: int) -> int:
        """Score ``window`` against the current candidates only.

        Falls back to :meth:`full_scan` when no candidate has the window.

        Returns:
            Sum of frequencies added by this call.
        """
        total = 0
        for candidate in self._candidates.values():
            freq = candidate.profile.frequency(window, order)
            candidate.score += freq
            total += freq
        if total == 0:
            total = self.full_scan(window, order)
        return total

    def score_window(self, window: str, order: int) -> int:
        if not self._candidates:
            return self.full_scan(window, order)
        return self.update(window, order)

    def score_word(self, token: WideToken, order: int) -> int:
        """Feed every window of ``token`` to the engine.

        Returns:
            Number of windows scored.
        """
        count = 0
        for window in iter_windows(token, order):
            self.score_window(window, order)
            count += 1
        return count

    def ranking(self) -> list[Candidate]:
        """Return candidates by descending score, ties in profile load order."""
        return sorted(
            self._candidates.values(),
            key=lambda candidate: (-candidate.score, candidate.load_index),
        )
