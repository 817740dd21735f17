# passmeter/config.py
"""
Settings persistence for the passmeter CLI and web API.
Settings saved as JSON in %APPDATA%/PassMeter/config.json (Windows) or ~/.passmeter/config.json (fallback).
PASSMETER_CONFIG overrides the path.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from .models import CrackTimeOptions, PasswordOptions, Strength, StrengthTableError
from .strength import validate_strength_table

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "policy": {},
    "strength_table": {
        "very_weak": 20,
        "weak": 40,
        "good": 60,
        "strong": 80,
        "very_strong": 100,
        "perfect": 120,
    },
    "crack_time": {
        "guesses_per_second": 5e11,
        "possible_characters": 95,
    },
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassMeter")
    return os.path.join(os.path.expanduser("~"), ".passmeter")


def config_path() -> str:
    return os.getenv("PASSMETER_CONFIG") or os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    out = copy.deepcopy(DEFAULTS)
    if not os.path.exists(p):
        return out
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read config %s, using defaults: %s", p, e)
        return out
    if not isinstance(data, dict):
        logger.warning("config %s is not a JSON object, using defaults", p)
        return out
    # merge defaults one level deep
    for key, value in data.items():
        if isinstance(out.get(key), dict) and isinstance(value, dict):
            out[key].update(value)
        else:
            out[key] = value
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p


def options_from_config(cfg: Dict[str, Any]) -> PasswordOptions:
    return PasswordOptions.from_dict(cfg.get("policy"))


def strength_table_from_config(cfg: Dict[str, Any]) -> Dict[Strength, int]:
    table = cfg.get("strength_table")
    if table is None:
        table = DEFAULTS["strength_table"]
    if not isinstance(table, dict):
        raise StrengthTableError("strength_table must be a JSON object of tier name to max score")
    return validate_strength_table(table)


def crack_time_options_from_config(cfg: Dict[str, Any]) -> CrackTimeOptions:
    ct = cfg.get("crack_time") or {}
    defaults = CrackTimeOptions()
    return CrackTimeOptions(
        guesses_per_second=float(ct.get("guesses_per_second", defaults.guesses_per_second)),
        possible_characters=int(ct.get("possible_characters", defaults.possible_characters)),
    )
