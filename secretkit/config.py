# secretkit/config.py
"""
Simple settings persistence for secretkit.
Settings saved as JSON in %APPDATA%/secretkit/config.json (Windows) or ~/.secretkit/config.json (fallback).
SECRETKIT_CONFIG overrides the path.
"""

import os
import json
from typing import Dict, Any, Optional

from .log import get_logger
from .pool import GenerationOptions

logger = get_logger("config")

DEFAULTS: Dict[str, Any] = {
    "length": 10,
    "numbers": False,
    "symbols": False,
    "lowercase": True,
    "uppercase": True,
    "exclude_similar_characters": False,
    "exclude": "",
    "strict": False,
    "pronounceable_length": 10,
    "otp_length": 6,
    "api_key_bytes": 32,
    "log_level": "WARNING",
}

_OPTION_KEYS = (
    "length", "numbers", "symbols", "lowercase", "uppercase",
    "exclude_similar_characters", "exclude", "strict",
)

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "secretkit")
    return os.path.join(os.path.expanduser("~"), ".secretkit")

def config_path() -> str:
    return os.getenv("SECRETKIT_CONFIG") or os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level must be an object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p

def options_from_config(cfg: Dict[str, Any]) -> GenerationOptions:
    """Build GenerationOptions from the generator keys of a loaded config."""
    return GenerationOptions(**{k: cfg.get(k, DEFAULTS[k]) for k in _OPTION_KEYS})
