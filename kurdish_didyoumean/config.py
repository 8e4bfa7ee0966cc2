from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from .logger import DEFAULT_LOG_LEVEL, VALID_LEVELS, get_logger

logger = get_logger(__name__)

MAX_SUGGESTIONS_CAP = 100
MAX_THRESHOLD = 20

DEFAULT_CONFIG: Dict = {
    "max_suggestions": 3,
    "threshold": 3,
    "log_level": DEFAULT_LOG_LEVEL,
    # Seed the dictionary with the bundled Sorani/Kurmanji sample words
    "include_seed_words": True,
    # Extra wordlists: local paths or http(s) URLs, one word per line
    "wordlists": [],
}

CONFIG_PATH = Path.cwd() / "didyoumean.json"


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
    merged["max_suggestions"] = normalize_limit(merged.get("max_suggestions"))
    merged["threshold"] = normalize_threshold(merged.get("threshold"))
    merged["log_level"] = normalize_log_level(merged.get("log_level"))
    merged["include_seed_words"] = bool(merged.get("include_seed_words", True))
    merged["wordlists"] = normalize_wordlists(merged.get("wordlists"))
    return merged


def _write_json(path: Path, payload: Dict):
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def get_config(path: Optional[Path] = None) -> Dict:
    return _normalized_config(_read_config_json(Path(path) if path else CONFIG_PATH))


def save_config(updates: Dict, path: Optional[Path] = None) -> Dict:
    target = Path(path) if path else CONFIG_PATH
    cfg = get_config(target)
    cfg.update(updates)
    cfg = _normalized_config(cfg)
    _write_json(target, cfg)
    logger.info("Saved config to %s", target)
    return cfg


def _clamped_int(raw, default: int, maximum: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = default
    return max(0, min(value, maximum))


def normalize_limit(raw) -> int:
    return _clamped_int(raw, DEFAULT_CONFIG["max_suggestions"], MAX_SUGGESTIONS_CAP)


def normalize_threshold(raw) -> int:
    return _clamped_int(raw, DEFAULT_CONFIG["threshold"], MAX_THRESHOLD)


def normalize_log_level(raw) -> str:
    if isinstance(raw, str):
        level = raw.strip().upper()
        if level in VALID_LEVELS:
            return level
    return DEFAULT_LOG_LEVEL


def normalize_wordlists(raw) -> list[str]:
    """Accept a list or a comma-separated string; keep trimmed, unique entries."""
    if isinstance(raw, str):
        values = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        values = raw
    else:
        values = []
    selected: list[str] = []
    for item in values:
        if not isinstance(item, str):
            continue
        source = item.strip()
        if source and source not in selected:
            selected.append(source)
    return selected
