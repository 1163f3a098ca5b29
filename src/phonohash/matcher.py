"""Spelling suggestions using fingerprints as a pre-filter.

SuggestionMatcher fingerprints a word list once. A query is fingerprinted
and compared against every stored fingerprint, which is much cheaper than
computing edit distance against the whole list. Only the words that pass
the fingerprint filter are ranked by Levenshtein distance (via rapidfuzz).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from rapidfuzz.distance import Levenshtein

from phonohash.distance import SIMILARITY_THRESHOLD, distance
from phonohash.fingerprint import Fingerprint, fingerprint

logger = logging.getLogger(__name__)

MAX_CANDIDATES_CAP = 100


@dataclass(frozen=True)
class Suggestion:
    """A word from the list that is close to the query."""

    word: str
    distance: int  # Weighted fingerprint distance
    edit_distance: int  # Levenshtein distance, case-insensitive


class SuggestionMatcher:
    """Suggest words from a fixed list that sound like a query.

    Ranking order:
    1. Fingerprint distance (ascending)
    2. Edit distance (ascending)
    3. The word itself, for a stable order
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._entries: list[tuple[str, Fingerprint]] = []
        seen: set[str] = set()
        for word in words:
            word = word.strip()
            if not word or word in seen:
                continue
            seen.add(word)
            self._entries.append((word, fingerprint(word)))
        logger.debug("Fingerprinted %d words", len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def suggest(
        self,
        word: str,
        max_candidates: int = 5,
        max_distance: int = SIMILARITY_THRESHOLD,
    ) -> list[Suggestion]:
        """Return the closest words to ``word``.

        Args:
            word: The (possibly misspelled) query.
            max_candidates: Maximum number of suggestions, capped at 100.
            max_distance: Fingerprint distance must be strictly below this.

        Returns:
            Suggestions sorted best first.
        """
        if not word or not word.strip():
            return []
        if max_candidates <= 0:
            return []
        max_candidates = min(max_candidates, MAX_CANDIDATES_CAP)

        word = word.strip()
        query = fingerprint(word)
        query_lower = word.lower()

        candidates: list[Suggestion] = []
        for form, form_fp in self._entries:
            dist = distance(query, form_fp)
            if dist >= max_distance:
                continue
            candidates.append(Suggestion(
                word=form,
                distance=dist,
                edit_distance=Levenshtein.distance(query_lower, form.lower()),
            ))

        candidates.sort(key=lambda s: (s.distance, s.edit_distance, s.word))
        return candidates[:max_candidates]

    def best_match(self, word: str, max_distance: int = SIMILARITY_THRESHOLD) -> str | None:
        """Return the single best suggestion, or None if nothing is close enough."""
        suggestions = self.suggest(word, max_candidates=1, max_distance=max_distance)
        return suggestions[0].word if suggestions else None
