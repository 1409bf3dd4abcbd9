"""Asyncio client for the Zabbix JSON-RPC API."""

__version__ = "0.1.0"

from .api import LogoutResult, ZabbixAPI
from .config import ClientConfig, ConfigLoadError, config_from_env, load_config
from .errors import (
    ZabbixAPIError,
    ZabbixBadClientError,
    ZabbixBadStatusError,
    ZabbixClientError,
    ZabbixUnauthorizedError,
)
from .http import ZabbixHttpClient
from .protocol import BOOTSTRAP_METHODS, build_request, requires_auth
from .session import AuthState, ZabbixSession

__all__ = [
    "BOOTSTRAP_METHODS",
    "AuthState",
    "ClientConfig",
    "ConfigLoadError",
    "LogoutResult",
    "ZabbixAPI",
    "ZabbixAPIError",
    "ZabbixBadClientError",
    "ZabbixBadStatusError",
    "ZabbixClientError",
    "ZabbixHttpClient",
    "ZabbixSession",
    "ZabbixUnauthorizedError",
    "__version__",
    "build_request",
    "config_from_env",
    "load_config",
    "requires_auth",
]
