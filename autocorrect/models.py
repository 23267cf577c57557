from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class Outcome(Enum):
    """What the engine concluded about a typed word."""

    EXACT_MATCH = "exact_match"
    NO_MATCH = "no_match"
    SUGGESTIONS = "suggestions"


@dataclass(frozen=True)
class SuggestionResult:
    """Outcome of a single ``suggest`` call.

    ``words`` is empty for ``EXACT_MATCH`` (the word is fine) and for
    ``NO_MATCH`` (the word is wrong and nothing was close enough).
    """

    outcome: Outcome
    words: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.outcome is Outcome.SUGGESTIONS and not self.words:
            raise ValueError("a SUGGESTIONS result needs at least one word")
        if self.outcome is not Outcome.SUGGESTIONS and self.words:
            raise ValueError(f"{self.outcome.name} result cannot carry words")

    @classmethod
    def exact_match(cls) -> "SuggestionResult":
        return cls(Outcome.EXACT_MATCH)

    @classmethod
    def no_match(cls) -> "SuggestionResult":
        return cls(Outcome.NO_MATCH)

    @classmethod
    def suggestions(cls, words: Iterable[str]) -> "SuggestionResult":
        return cls(Outcome.SUGGESTIONS, tuple(words))

    @property
    def is_exact_match(self) -> bool:
        return self.outcome is Outcome.EXACT_MATCH

    @property
    def is_no_match(self) -> bool:
        return self.outcome is Outcome.NO_MATCH

    def as_list(self) -> list[str]:
        return list(self.words)
