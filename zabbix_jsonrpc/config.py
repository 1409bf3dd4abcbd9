"""Client configuration loading.

Configuration is a YAML mapping or a set of environment variables:

    url: https://zabbix.example.com
    timeout: 5000
    user: monitoring
    password: secret
    # or instead of user/password
    token: 7959e30884cf778cbf693c66c46a382c
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .http import DEFAULT_TIMEOUT_MS


class ConfigLoadError(Exception):
    """Error loading client configuration."""


@dataclass(frozen=True)
class ClientConfig:
    """Connection and credential settings for a Zabbix API client.

    Attributes:
        url: Frontend base URL, without the API endpoint path.
        timeout: Request timeout in milliseconds.
        user: Login name for credential authentication.
        password: Password for credential authentication.
        token: Existing session id for token authentication.
    """

    url: str
    timeout: int = DEFAULT_TIMEOUT_MS
    user: str | None = None
    password: str | None = None
    token: str | None = None


def _parse_timeout(value: Any) -> int:
    if value is None:
        return DEFAULT_TIMEOUT_MS
    if isinstance(value, bool):
        raise ConfigLoadError(f"Invalid timeout: {value!r}")
    try:
        timeout = int(value)
    except (TypeError, ValueError) as err:
        raise ConfigLoadError(f"Invalid timeout: {value!r}") from err
    if timeout <= 0:
        raise ConfigLoadError(f"Timeout must be positive, got {timeout}")
    return timeout


def _optional_str(value: Any) -> str | None:
    # YAML reads bare numbers such as `password: 123456` as ints
    return None if value is None else str(value)


def config_from_mapping(data: Mapping[str, Any]) -> ClientConfig:
    """Build a ClientConfig from a plain mapping.

    Raises:
        ConfigLoadError: If url is missing or timeout is not a positive integer.
    """
    url = data.get("url")
    if not url:
        raise ConfigLoadError("url is required")
    return ClientConfig(
        url=str(url),
        timeout=_parse_timeout(data.get("timeout")),
        user=_optional_str(data.get("user")),
        password=_optional_str(data.get("password")),
        token=_optional_str(data.get("token")),
    )


def load_config(path: Path) -> ClientConfig:
    """Load client configuration from a YAML file."""
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}")
    with path.open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as err:
            raise ConfigLoadError(f"Invalid YAML in {path}") from err
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping in {path}")
    return config_from_mapping(data)


def config_from_env(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """Load client configuration from ZABBIX_* environment variables."""
    env = os.environ if environ is None else environ
    return config_from_mapping(
        {
            "url": env.get("ZABBIX_URL"),
            "timeout": env.get("ZABBIX_TIMEOUT"),
            "user": env.get("ZABBIX_USER"),
            "password": env.get("ZABBIX_PASSWORD"),
            "token": env.get("ZABBIX_API_TOKEN"),
        }
    )
