"""Load word lists for the suggestion engine.

A dictionary can come from a bundled name (``small``), a file on disk, or an
http(s) URL. Files are plain UTF-8 with one word per line; a first line that
is a bare integer is treated as the word count, which is how the bundled
dictionaries are stored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from . import http_client
from .exceptions import DictionaryLoadError
from .logger import get_logger

logger = get_logger(__name__)

BUNDLED_DIR = Path(__file__).resolve().parent / "dictionaries"
DICTIONARY_SUFFIX = ".txt"


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def parse_words(lines: Iterable[str]) -> List[str]:
    """Turn raw lines into an ordered list of distinct words.

    With a count header only that many non-blank lines are read; duplicates
    among them still count toward the total.
    """
    it = iter(lines)
    words: List[str] = []
    seen: set[str] = set()
    expected = None
    consumed = 0

    for raw in it:
        first = raw.strip()
        if not first:
            continue
        if first.isascii() and first.isdigit():
            expected = int(first)
        else:
            consumed = 1
            seen.add(first)
            words.append(first)
        break

    for raw in it:
        if expected is not None and consumed >= expected:
            break
        word = raw.strip()
        if not word:
            continue
        consumed += 1
        if word in seen:
            logger.debug("Skipping duplicate dictionary entry '%s'", word)
            continue
        seen.add(word)
        words.append(word)

    if expected is not None and consumed < expected:
        logger.warning("Dictionary header promised %d words, found %d", expected, consumed)
    return words


def load_dictionary_file(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    logger.info("Loading dictionary file %s", path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return parse_words(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read dictionary %s: %s", path, e)
        raise DictionaryLoadError(f"Cannot read dictionary {path}: {e}") from e


def available_dictionaries(directory: Union[str, Path] = BUNDLED_DIR) -> List[str]:
    """Names that :func:`load_named_dictionary` accepts for ``directory``."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob("*" + DICTIONARY_SUFFIX))


def load_named_dictionary(name: str, directory: Union[str, Path] = BUNDLED_DIR) -> List[str]:
    path = Path(directory) / f"{name}{DICTIONARY_SUFFIX}"
    if not path.is_file():
        known = ", ".join(available_dictionaries(directory)) or "none"
        raise DictionaryLoadError(f"No dictionary named '{name}' (available: {known})")
    return load_dictionary_file(path)


def load_dictionary_url(url: str, **kwargs) -> List[str]:
    logger.info("Downloading dictionary %s", url)
    text = http_client.get_text(url, **kwargs)
    return parse_words(text.splitlines())


def load_dictionary(source: Union[str, Path], directory: Union[str, Path] = BUNDLED_DIR) -> List[str]:
    """Load a dictionary from a URL, an existing path, or a bundled name."""
    if isinstance(source, Path):
        return load_dictionary_file(source)
    source = (source or "").strip()
    if not source:
        raise DictionaryLoadError("No dictionary source given")
    if _is_url(source):
        return load_dictionary_url(source)
    if Path(source).is_file():
        return load_dictionary_file(source)
    return load_named_dictionary(source, directory)
