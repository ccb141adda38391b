"""Load/save run parameters. Configs live in configs/ as {name}.json; missing keys fall back to defaults."""

import json
import re
from pathlib import Path

CONFIG_DIR = Path(__file__).resolve().parent / "configs"


def _sanitize_name(name: str) -> str:
    s = (name or "").strip()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"[\s-]+", "_", s).strip("_")
    return s[:64] or "unnamed"


def get_config_path(name: str) -> Path:
    return CONFIG_DIR / f"{_sanitize_name(name)}.json"


def list_configs() -> list[str]:
    if not CONFIG_DIR.exists():
        return []
    return sorted((f.stem for f in CONFIG_DIR.glob("*.json")), key=str.lower)


def load_config(path: Path | str | None = None) -> dict:
    if path is None:
        return _default_config()
    p = Path(path)
    if not p.exists():
        return _default_config()
    with open(p, "r") as f:
        return _merge_defaults(json.load(f))


def save_config(params: dict, name: str) -> Path:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    path = get_config_path(name)
    with open(path, "w") as f:
        json.dump(params, f, indent=2)
    return path


def _default_config() -> dict:
    return {
        "world": {"side": 100},
        "tick_interval": 0.1,
        "seed": -1,
        "spawn": True,
        "worm": {"segments": 8, "segment_length": 3.0, "speed": 20.0},
        "window": {"width": 800, "height": 800},
        "log_level": "INFO",
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    for section in ("world", "worm", "window"):
        if section in data:
            d[section] = {**d[section], **data[section]}
    for k in ("tick_interval", "seed", "spawn", "log_level"):
        if k in data:
            d[k] = data[k]
    return d
