from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import get_config, normalize_max_results
from .dictionary import load_dictionary
from .engine import SuggestionEngine
from .exceptions import AutocorrectError
from .logger import VALID_LEVELS, enable_file_logging, get_logger, set_log_level
from .repl import format_result, run_repl

logger = get_logger(__name__)

EX_SUCCESS = 0
EX_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autocorrect",
        description="Suggest dictionary words close to a misspelled word.",
    )
    parser.add_argument("words", nargs="*", help="words to check; omit for an interactive prompt")
    parser.add_argument("-d", "--dictionary", help="bundled dictionary name, word-list path, or URL")
    parser.add_argument("-t", "--threshold", type=int, help="maximum edit distance of a suggestion")
    parser.add_argument("-c", "--config", help="path to a JSON config file")
    parser.add_argument("-n", "--max-results", type=int, help="print at most this many suggestions")
    parser.add_argument("--log-level", choices=VALID_LEVELS, type=str.upper)
    return parser


def main(argv: Optional[List[str]] = None, stdin=None, stdout=None, stderr=None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)
    cfg = get_config(args.config)
    enable_file_logging()
    set_log_level(args.log_level or cfg["log_level"])

    source = args.dictionary or cfg["dictionary"]
    threshold = args.threshold if args.threshold is not None else cfg["threshold"]
    max_results = cfg["max_results"]
    if args.max_results is not None:
        max_results = normalize_max_results(args.max_results)

    try:
        engine = SuggestionEngine(load_dictionary(source), threshold)
    except AutocorrectError as e:
        logger.error("Startup failed: %s", e)
        print(f"autocorrect: {e}", file=stderr)
        return EX_FAILURE

    if args.words:
        for typed in args.words:
            print(format_result(typed, engine.suggest(typed), max_results), file=stdout)
        return EX_SUCCESS

    run_repl(engine, stdin, stdout, quit_command=cfg["quit_command"], max_results=max_results)
    return EX_SUCCESS
