# passgauge/config.py
"""
Simple settings persistence for PassGauge.
Settings saved as JSON in %APPDATA%/PassGauge/config.json (Windows) or ~/.passgauge/config.json (fallback).
PASSGAUGE_HOME overrides the directory.
"""

import os
import json
import logging
from typing import Dict, Any, Iterable

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "debounce_ms": 100,
    "generated_length": 16,
    "max_password_length": 4096,
}

def _appdata_dir() -> str:
    override = os.getenv("PASSGAUGE_HOME")
    appdata = os.getenv("APPDATA")
    if override:
        d = override
    elif appdata:
        d = os.path.join(appdata, "PassGauge")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passgauge")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read settings from %s (%s); using defaults", p, e)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    if isinstance(data, dict):
        out.update(data)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def update_config(pairs: Iterable[str]) -> Dict[str, Any]:
    """
    Apply KEY=VALUE strings to the stored settings and save them.
    Only known keys with positive integer values are accepted.
    """
    cfg = load_config()
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or key not in DEFAULTS:
            raise ValueError(f"Unknown setting: {pair!r} (expected one of {', '.join(DEFAULTS)})")
        try:
            value = int(raw)
        except ValueError:
            raise ValueError(f"Setting {key} needs an integer, got {raw!r}") from None
        if value <= 0:
            raise ValueError(f"Setting {key} must be positive")
        cfg[key] = value
    save_config(cfg)
    return cfg

def clamp_input(password: str, cfg: Dict[str, Any]) -> str:
    """Truncate over-long input to the configured maximum before analysis."""
    limit = int(cfg.get("max_password_length", DEFAULTS["max_password_length"]))
    if len(password) > limit:
        logger.warning("Password input truncated from %d to %d characters", len(password), limit)
        return password[:limit]
    return password
