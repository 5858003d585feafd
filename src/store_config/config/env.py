from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from store_config.config.models import ConsulSettings, NacosSettings
from store_config.errors import StoreConfigurationError


def load_dotenv_if_present(dotenv_path: Path) -> bool:
    if not dotenv_path.exists():
        return False
    return load_dotenv(dotenv_path=dotenv_path, override=False)


def _environ(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if value is None or not value.strip():
        raise StoreConfigurationError(f"Missing required environment variable: {name}")
    return value.strip()


def _parse_port(env: Mapping[str, str], name: str, *, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise StoreConfigurationError(f"Environment variable {name} must be an integer, got: {raw!r}") from e


def _parse_flag(raw: Optional[str]) -> bool:
    return (raw or "false").strip().lower() == "true"


def read_consul_settings(env: Optional[Mapping[str, str]] = None) -> ConsulSettings:
    env = _environ(env)
    host = _require(env, "CONSUL_HOST")
    secure = _parse_flag(env.get("SSL"))
    port = _parse_port(env, "CONSUL_PORT", default=443 if secure else 80)
    try:
        return ConsulSettings(host=host, port=port, secure=secure, token=env.get("CONSUL_TOKEN") or None)
    except ValidationError as e:
        raise StoreConfigurationError(f"Invalid Consul settings: {e}") from e


def read_nacos_settings(env: Optional[Mapping[str, str]] = None) -> NacosSettings:
    env = _environ(env)
    endpoint = _require(env, "NACOS_ENDPOINT")
    port = _parse_port(env, "NACOS_PORT", default=None)
    try:
        return NacosSettings(
            endpoint=endpoint,
            port=port,
            namespace=env.get("NACOS_NAMESPACE") or None,
            group=env.get("NACOS_GROUP", "default"),
        )
    except ValidationError as e:
        raise StoreConfigurationError(f"Invalid Nacos settings: {e}") from e
