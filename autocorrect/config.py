from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional, Union

from .logger import DEFAULT_LOG_LEVEL, VALID_LEVELS, get_logger

logger = get_logger(__name__)

DEFAULT_DICTIONARY = "small"
DEFAULT_THRESHOLD = 3
DEFAULT_QUIT_COMMAND = "q"

DEFAULT_CONFIG: Dict = {
    # bundled dictionary name, path to a word list, or http(s) URL
    "dictionary": DEFAULT_DICTIONARY,
    "threshold": DEFAULT_THRESHOLD,
    "quit_command": DEFAULT_QUIT_COMMAND,
    # None => print every suggestion
    "max_results": None,
    "log_level": DEFAULT_LOG_LEVEL,
}

CONFIG_DIR = Path.home() / ".autocorrect"
CONFIG_PATH = CONFIG_DIR / "config.json"


def _read_config_json(path: Path) -> Dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}


def _deep_copy_defaults() -> Dict:
    return json.loads(json.dumps(DEFAULT_CONFIG))


def _normalized_config(raw_cfg: Dict) -> Dict:
    raw = raw_cfg if isinstance(raw_cfg, dict) else {}
    merged = _deep_copy_defaults()
    merged.update(raw)
    merged["dictionary"] = normalize_dictionary(merged.get("dictionary"))
    merged["threshold"] = normalize_threshold(merged.get("threshold"))
    merged["quit_command"] = normalize_quit_command(merged.get("quit_command"))
    merged["max_results"] = normalize_max_results(merged.get("max_results"))
    merged["log_level"] = normalize_log_level(merged.get("log_level"))
    return merged


def _write_json(path: Path, payload: Dict):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def get_config(path: Optional[Union[str, Path]] = None) -> Dict:
    config_path = Path(path) if path else CONFIG_PATH
    return _normalized_config(_read_config_json(config_path))


def save_config(updates: Dict, path: Optional[Union[str, Path]] = None) -> Dict:
    config_path = Path(path) if path else CONFIG_PATH
    cfg = get_config(config_path)
    cfg.update(updates)
    cfg = _normalized_config(cfg)
    _write_json(config_path, cfg)
    logger.info("Saved config to %s", config_path)
    return cfg


def normalize_dictionary(raw) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return DEFAULT_DICTIONARY


def normalize_threshold(raw) -> int:
    """Coerce to int; the engine itself rejects values below 1."""
    if isinstance(raw, bool):
        return DEFAULT_THRESHOLD
    try:
        return int(raw)
    except (TypeError, ValueError):
        return DEFAULT_THRESHOLD


def normalize_quit_command(raw) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return DEFAULT_QUIT_COMMAND


def normalize_max_results(raw) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return max(1, value)


def normalize_log_level(raw) -> str:
    if isinstance(raw, str) and raw.strip().upper() in VALID_LEVELS:
        return raw.strip().upper()
    return DEFAULT_LOG_LEVEL
