from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

APP_NAME = "megalabs-sms"
CONFIG_FILENAME = "config.toml"
ENV_API_USER = "MEGALABS_API_USER"
ENV_API_PASSWORD = "MEGALABS_API_PASSWORD"

DEFAULT_SLEEP_TIME = 0.0
DEFAULT_OPEN_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 10.0


@dataclass
class AppConfig:
    api_user: str = ""
    api_password: str = ""
    sleep_time: float = DEFAULT_SLEEP_TIME
    open_timeout: float = DEFAULT_OPEN_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def _to_float(value: Any, default: float) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "api_user": cfg.api_user,
        "api_password": cfg.api_password,
        "sleep_time": float(cfg.sleep_time),
        "open_timeout": float(cfg.open_timeout),
        "read_timeout": float(cfg.read_timeout),
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    return AppConfig(
        api_user=str(data.get("api_user") or "").strip(),
        api_password=str(data.get("api_password") or ""),
        sleep_time=_to_float(data.get("sleep_time"), DEFAULT_SLEEP_TIME),
        open_timeout=_to_float(data.get("open_timeout"), DEFAULT_OPEN_TIMEOUT),
        read_timeout=_to_float(data.get("read_timeout"), DEFAULT_READ_TIMEOUT),
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_credentials(
        cfg: AppConfig,
        *,
        api_user: str | None = None,
        api_password: str | None = None,
) -> tuple[str, str]:
    """Command line value, then environment, then settings file."""
    user = api_user or os.getenv(ENV_API_USER, "").strip() or cfg.api_user
    password = api_password or os.getenv(ENV_API_PASSWORD, "") or cfg.api_password
    return user, password


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
