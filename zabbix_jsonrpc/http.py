"""HTTP transport for the Zabbix JSON-RPC endpoint."""

from __future__ import annotations

import logging
from typing import Any, Final

import aiohttp

from .errors import ZabbixBadStatusError

_LOGGER = logging.getLogger(__name__)

API_ENDPOINT: Final = "/api_jsonrpc.php"
USER_AGENT: Final = "python/zabbix-jsonrpc"
DEFAULT_TIMEOUT_MS: Final = 5_000
# Extra slack for the socket read so the request timeout fires first.
SOCKET_READ_SLACK_MS: Final = 1_000


class ZabbixHttpClient:
    """HTTP client bound to a Zabbix frontend base URL and timeout.

    Instances are immutable; reconfiguring means building a new one.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        *,
        timeout: int = DEFAULT_TIMEOUT_MS,
    ) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        """Base URL without trailing slash."""
        return self._base_url

    @property
    def timeout(self) -> int:
        """Request timeout in milliseconds."""
        return self._timeout

    @property
    def url(self) -> str:
        """Full URL of the JSON-RPC endpoint."""
        return f"{self._base_url}{API_ENDPOINT}"

    def _client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=self._timeout / 1000,
            sock_read=(self._timeout + SOCKET_READ_SLACK_MS) / 1000,
        )

    async def post(self, envelope: dict[str, Any]) -> Any:
        """POST a request envelope and return the decoded response body.

        Raises:
            ZabbixBadStatusError: If the response status is not 200.
            TimeoutError: If the request timed out.
            aiohttp.ClientError: If the connection failed.
        """
        async with self._session.post(
            self.url,
            json=envelope,
            headers={
                "User-Agent": USER_AGENT,
                "Content-Type": "application/json-rpc",
            },
            timeout=self._client_timeout(),
        ) as resp:
            if resp.status != 200:
                _LOGGER.warning(
                    "Request %s to %s failed with status %s",
                    envelope.get("id"),
                    self.url,
                    resp.status,
                )
                raise ZabbixBadStatusError(resp.status)
            # Zabbix answers with application/json, older frontends with text/html
            return await resp.json(content_type=None)
