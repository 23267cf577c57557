from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
# Import the package from the checkout without requiring an install
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from autocorrect.engine import SuggestionEngine  # noqa: E402


@pytest.fixture
def animal_engine() -> SuggestionEngine:
    return SuggestionEngine(["cat", "cot", "cow", "dog"], threshold=2)


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("4\ncat\ncot\ncow\ndog\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    import autocorrect.logger as logger_mod

    target = tmp_path / "logs"
    monkeypatch.setattr(logger_mod, "LOG_DIR", target)
    monkeypatch.setattr(logger_mod, "LOG_FILE", target / "autocorrect.log")
    yield target
    logger_mod.disable_file_logging()
