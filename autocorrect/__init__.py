"""
Autocorrect: suggest dictionary words close to a misspelled word.

Typical use::

    from autocorrect import SuggestionEngine, load_dictionary

    engine = SuggestionEngine(load_dictionary("small"), threshold=2)
    result = engine.suggest("wrod")
    if result.is_exact_match:
        ...
    elif result.is_no_match:
        ...
    else:
        print(", ".join(result.words))

Suggestions are ordered by edit distance, then alphabetically, and never
exceed the threshold. ``python -m autocorrect`` starts an interactive prompt.
"""

from __future__ import annotations

from .dictionary import load_dictionary
from .engine import SuggestionEngine
from .exceptions import (
    AutocorrectError,
    ConfigurationError,
    DictionaryLoadError,
    MissingDependencyError,
)
from .models import Outcome, SuggestionResult
from .typo import distance, levenshtein, within_length_band

__all__ = [
    "AutocorrectError",
    "ConfigurationError",
    "DictionaryLoadError",
    "MissingDependencyError",
    "Outcome",
    "SuggestionEngine",
    "SuggestionResult",
    "distance",
    "levenshtein",
    "load_dictionary",
    "within_length_band",
]
