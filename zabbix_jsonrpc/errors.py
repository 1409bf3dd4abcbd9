"""Client error types for Zabbix JSON-RPC interactions."""

from __future__ import annotations

from typing import Any


class ZabbixClientError(Exception):
    """Base error for Zabbix client failures."""


class ZabbixBadClientError(ZabbixClientError):
    """No transport configured; create_client() must be called first."""


class ZabbixBadStatusError(ZabbixClientError):
    """HTTP response with a status other than 200."""

    def __init__(self, status: int, message: str | None = None) -> None:
        super().__init__(message or f"Unexpected HTTP status {status}")
        self.status = status


class ZabbixUnauthorizedError(ZabbixClientError):
    """Authentication response did not have the expected shape."""


class ZabbixAPIError(ZabbixClientError):
    """Error envelope returned by the remote API."""

    def __init__(self, code: int | None, message: str, data: Any = None) -> None:
        super().__init__(f"Zabbix API error {code}: {message} - {data}")
        self.code = code
        self.message = message
        self.data = data
