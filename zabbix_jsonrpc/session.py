"""Session state for Zabbix API access.

A session holds the configured transport, the current auth token and the
next request id. Every read and write goes through one asyncio lock so that
concurrent callers see a consistent snapshot and never share a request id.
The lock is only held for in-memory work, never across a network round trip.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import TYPE_CHECKING, Any

from .errors import ZabbixBadClientError
from .protocol import build_request

if TYPE_CHECKING:
    from .http import ZabbixHttpClient

_FIELDS = ("transport", "token", "next_id")


class AuthState(Enum):
    """Authentication state derived from the session snapshot."""

    UNCONFIGURED = "unconfigured"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class ZabbixSession:
    """Lock-guarded transport, token and request counter.

    Usage:
        session = ZabbixSession()
        await session.reset(ZabbixHttpClient(http, "https://zabbix.example.com"))
        transport, envelope = await session.prepare("host.get", {"output": ["name"]})
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._transport: ZabbixHttpClient | None = None
        self._token: str | None = None
        self._next_id = 1

    @property
    def token(self) -> str | None:
        """Current auth token."""
        return self._token

    @property
    def transport(self) -> ZabbixHttpClient | None:
        """Configured transport, if any."""
        return self._transport

    @property
    def state(self) -> AuthState:
        """Authentication state for the current snapshot."""
        if self._transport is None:
            return AuthState.UNCONFIGURED
        if self._token is None:
            return AuthState.UNAUTHENTICATED
        return AuthState.AUTHENTICATED

    async def fetch(self, key: str) -> Any:
        """Read a single field.

        Fetching "next_id" consumes the id, same as next_id().
        """
        if key == "next_id":
            return await self.next_id()
        if key not in _FIELDS:
            raise KeyError(key)
        async with self._lock:
            return getattr(self, f"_{key}")

    async def next_id(self) -> int:
        """Return the current request id and advance the counter."""
        async with self._lock:
            return self._take_id()

    async def update(self, key: str, value: Any) -> None:
        """Overwrite a single field."""
        if key not in _FIELDS:
            raise KeyError(key)
        async with self._lock:
            setattr(self, f"_{key}", value)

    async def set_token(self, value: str | None) -> None:
        """Store a new auth token, or None to drop it."""
        await self.update("token", value)

    async def reset(self, transport: ZabbixHttpClient) -> None:
        """Replace the transport and start over with no token and id 1."""
        async with self._lock:
            self._transport = transport
            self._token = None
            self._next_id = 1

    async def clear(self) -> None:
        """Drop the transport and token, returning to the unconfigured state."""
        async with self._lock:
            self._transport = None
            self._token = None

    async def prepare(
        self, method: str, params: Any = None
    ) -> tuple[ZabbixHttpClient, dict[str, Any]]:
        """Snapshot the transport and build the request envelope for method.

        The transport check, token read and id increment happen under a
        single lock acquisition.

        Raises:
            ZabbixBadClientError: If no transport has been configured. No id
                is consumed in that case.
        """
        async with self._lock:
            if self._transport is None:
                raise ZabbixBadClientError(
                    "No client configured, call create_client() first"
                )
            envelope = build_request(
                request_id=self._take_id(),
                method=method,
                params=params,
                token=self._token,
            )
            return self._transport, envelope

    def _take_id(self) -> int:
        request_id = self._next_id
        self._next_id += 1
        return request_id
