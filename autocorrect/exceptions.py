"""Custom exception hierarchy for the autocorrect package.

Using specific exceptions instead of bare ``RuntimeError`` makes it easier
to catch expected errors (bad configuration, unreadable dictionaries) without
accidentally swallowing programming mistakes.
"""

from __future__ import annotations


class AutocorrectError(Exception):
    """Base exception for all autocorrect errors."""


class ConfigurationError(AutocorrectError):
    """A setting (such as the edit-distance threshold) is not usable."""


class DictionaryLoadError(AutocorrectError):
    """Failed to read a word list from a file, bundled name, or URL."""


class MissingDependencyError(AutocorrectError):
    """A required third-party module (requests) is not installed."""
