"""Candidate generation and ranking.

``SuggestionEngine`` holds an immutable dictionary and an edit-distance
threshold. For each query it skips words whose length rules them out, scores
the rest with :func:`~autocorrect.typo.levenshtein`, and returns the words
within the threshold ordered by distance, then alphabetically.
"""

from __future__ import annotations

from bisect import insort
from typing import Dict, Iterable, List, Tuple

from .exceptions import ConfigurationError
from .logger import get_logger
from .models import SuggestionResult
from .typo import levenshtein, within_length_band

logger = get_logger(__name__)


class SuggestionEngine:
    def __init__(self, words: Iterable[str], threshold: int):
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise ConfigurationError(f"threshold must be an integer, got {threshold!r}")
        if threshold < 1:
            raise ConfigurationError(f"threshold must be at least 1, got {threshold}")
        self._threshold = threshold
        self._words: Tuple[str, ...] = tuple(words)
        self._lookup = frozenset(self._words)
        # length -> words of that length, in dictionary order
        self._by_length: Dict[int, List[str]] = {}
        for word in self._words:
            self._by_length.setdefault(len(word), []).append(word)
        logger.info(
            "Engine ready: %d words, threshold %d", len(self._words), self._threshold
        )

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word) -> bool:
        return word in self._lookup

    def candidates(self, typed: str) -> List[str]:
        """Words whose length is within the threshold of ``typed``.

        Grouped by ascending length; dictionary order within a length.
        """
        typed_length = len(typed)
        low = max(0, typed_length - self._threshold)
        out: List[str] = []
        for length in range(low, typed_length + self._threshold + 1):
            group = self._by_length.get(length)
            if group and within_length_band(typed_length, length, self._threshold):
                out.extend(group)
        return out

    def suggest(self, typed: str) -> SuggestionResult:
        if typed in self._lookup:
            logger.debug("'%s' is in the dictionary", typed)
            return SuggestionResult.exact_match()

        candidates = self.candidates(typed)
        # buckets[d - 1] holds the words at distance d, kept sorted on insert
        buckets: List[List[str]] = [[] for _ in range(self._threshold)]
        for word in candidates:
            dist = levenshtein(typed, word)
            if 0 < dist <= self._threshold:
                insort(buckets[dist - 1], word)

        ranked = [word for bucket in buckets for word in bucket]
        logger.debug(
            "'%s': scored %d of %d words, %d within %d edits",
            typed,
            len(candidates),
            len(self._words),
            len(ranked),
            self._threshold,
        )
        if not ranked:
            return SuggestionResult.no_match()
        return SuggestionResult.suggestions(ranked)
