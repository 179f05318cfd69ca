from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from nfhub_client import Environment
from platformdirs import user_config_dir

APP_NAME = "nfhub"
CONFIG_FILENAME = "config.toml"
ENV_TOKEN = "NFHUB_TOKEN"
ENV_ENVIRONMENT = "NFHUB_ENVIRONMENT"
DEFAULT_ENVIRONMENT = "sandbox"


@dataclass
class AuthConfig:
    token: str = ""


@dataclass
class AppConfig:
    auth: AuthConfig = field(default_factory=AuthConfig)
    environment: str = DEFAULT_ENVIRONMENT
    debug: bool = False
    upload: bool = False
    decode: bool = True
    timeout_s: float = 15.0


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(auth=AuthConfig(token=""), environment=DEFAULT_ENVIRONMENT)


def normalize_environment(raw: Any) -> str:
    """Canonical lower-case environment name, or "" when unknown."""
    env = Environment.parse(raw)
    return env.name.lower() if env is not None else ""


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "environment": cfg.environment,
        "debug": cfg.debug,
        "upload": cfg.upload,
        "decode": cfg.decode,
        "timeout_s": float(cfg.timeout_s),
        "auth": {
            "token": cfg.auth.token,
        },
    }


def _as_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    environment = normalize_environment(data.get("environment"))
    if environment:
        cfg.environment = environment
    cfg.debug = _as_bool(data.get("debug"), cfg.debug)
    cfg.upload = _as_bool(data.get("upload"), cfg.upload)
    cfg.decode = _as_bool(data.get("decode"), cfg.decode)
    timeout = data.get("timeout_s")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        cfg.timeout_s = float(timeout)
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth.token = str(auth_raw.get("token") or "")
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_token(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_TOKEN, "").strip()
    if env_value:
        return env_value
    return (cfg.auth.token or "").strip()


def resolve_environment(cfg: AppConfig) -> str:
    env_value = normalize_environment(os.getenv(ENV_ENVIRONMENT, ""))
    if env_value:
        return env_value
    return normalize_environment(cfg.environment) or DEFAULT_ENVIRONMENT


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
