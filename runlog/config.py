import os
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "config.yaml"

# Paces at or beyond these bounds (min/mi) are treated as recording artifacts.
DEFAULT_PACE_MIN = 0.0
DEFAULT_PACE_MAX = 60.0
DEFAULT_RECENT_COUNT = 10


def _expand(value):
    """Recursively expand ~ and env vars in string values."""
    if isinstance(value, str):
        return os.path.expandvars(os.path.expanduser(value))
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    return value


def load_config(path=None):
    """Load YAML config, expanding ~ and $ENV_VARS in all string values."""
    path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return _expand(raw)


def get_activities_path(config=None):
    """Resolve the activity table path from config, or None if unset."""
    paths = (config or {}).get("paths") or {}
    if paths.get("activities"):
        return Path(paths["activities"])
    return None


def get_pace_band(config=None) -> tuple[float, float]:
    """Return the (low, high) exclusive pace band used for pace averaging."""
    summary = (config or {}).get("summary") or {}
    return (_setting(summary, "pace_min", DEFAULT_PACE_MIN, float),
            _setting(summary, "pace_max", DEFAULT_PACE_MAX, float))


def get_recent_count(config=None) -> int:
    summary = (config or {}).get("summary") or {}
    return _setting(summary, "recent_count", DEFAULT_RECENT_COUNT, int)


def _setting(section: dict, key: str, default, cast):
    # A key left blank in YAML loads as None
    value = section.get(key)
    return cast(default if value is None else value)
