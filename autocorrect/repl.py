"""Interactive prompt: read a word, print suggestions, repeat."""

from __future__ import annotations

from typing import Optional, TextIO

from .engine import SuggestionEngine
from .logger import get_logger
from .models import Outcome, SuggestionResult

logger = get_logger(__name__)

PROMPT = "Please enter a word:"
GOODBYE = "Bye!"
NO_MATCHES = "No matches found."
SEPARATOR = ", "


def format_result(typed: str, result: SuggestionResult, max_results: Optional[int] = None) -> str:
    if result.outcome is Outcome.EXACT_MATCH:
        return f"{typed} is spelled correctly"
    if result.outcome is Outcome.NO_MATCH:
        return NO_MATCHES
    words = result.words[:max_results] if max_results else result.words
    return "Did you mean:\n" + SEPARATOR.join(words)


def run_repl(
    engine: SuggestionEngine,
    stdin: TextIO,
    stdout: TextIO,
    quit_command: str = "q",
    max_results: Optional[int] = None,
) -> int:
    """Answer words from ``stdin`` until the quit command or EOF.

    Returns the number of words answered.
    """
    answered = 0
    while True:
        print(PROMPT, file=stdout)
        stdout.flush()
        line = stdin.readline()
        if not line:
            logger.debug("Input closed after %d queries", answered)
            break
        typed = line.rstrip("\r\n")
        if typed == quit_command:
            print(GOODBYE, file=stdout)
            break
        result = engine.suggest(typed)
        print(format_result(typed, result, max_results), file=stdout)
        answered += 1
    return answered
