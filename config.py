from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

USER_CONFIG_PATH = Path.home() / ".tuido_config.yaml"
DEFAULT_TODO_FILE = Path.home() / ".tuido.json"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _get_str(key: str) -> str:
    value = _load_config().get(key, "")
    return value.strip() if isinstance(value, str) else ""


def _set_str(key: str, value: Optional[str]) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data[key] = value
    else:
        data.pop(key, None)
    _save_config(data)


def get_todo_file(override: Optional[str] = None) -> Path:
    """Resolve the data file: explicit override, $TUIDO_FILE, config, default."""
    raw = override or os.getenv("TUIDO_FILE") or _get_str("todo_file")
    return Path(raw).expanduser() if raw else DEFAULT_TODO_FILE


def set_todo_file(value: Optional[str]) -> None:
    _set_str("todo_file", value)


def get_user_theme() -> str:
    return _get_str("theme")


def set_user_theme(value: Optional[str]) -> None:
    _set_str("theme", value)


def get_user_lang() -> str:
    return _get_str("lang")


def set_user_lang(value: Optional[str]) -> None:
    _set_str("lang", value)


def get_log_file() -> Optional[Path]:
    raw = _get_str("log_file")
    return Path(raw).expanduser() if raw else None
