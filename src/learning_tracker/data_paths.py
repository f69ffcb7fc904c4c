"""Helpers for resolving XDG data/config/cache locations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

APP_NAMESPACE = "learning-tracker"

_ENV_VARS = {
    "data": ("XDG_DATA_HOME", ".local/share"),
    "config": ("XDG_CONFIG_HOME", ".config"),
    "cache": ("XDG_CACHE_HOME", ".cache"),
}


def _ensure(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def _xdg_base(name: str) -> Path:
    env_var, fallback = _ENV_VARS[name]
    base = os.environ.get(env_var)
    if not base:
        base = os.path.join(Path.home(), fallback)
    return Path(base) / APP_NAMESPACE


def user_data_dir() -> Path:
    return _ensure(_xdg_base("data"))


def user_config_dir() -> Path:
    return _ensure(_xdg_base("config"))


def user_cache_dir() -> Path:
    return _ensure(_xdg_base("cache"))


def log_dir() -> Path:
    return _ensure(user_data_dir() / "logs")


def exports_dir() -> Path:
    return _ensure(user_data_dir() / "exports")


def db_path() -> Path:
    return user_data_dir() / "tracker.sqlite3"


def runtime_path(kind: Literal["data", "config", "cache"]) -> Path:
    if kind == "data":
        return user_data_dir()
    if kind == "config":
        return user_config_dir()
    if kind == "cache":
        return user_cache_dir()
    msg = f"unknown runtime path kind: {kind}"
    raise ValueError(msg)
