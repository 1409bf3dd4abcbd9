"""Public facade for the Zabbix JSON-RPC API.

Example:
    async with ZabbixAPI() as api:
        await api.create_client("https://zabbix.example.com")
        await api.login_with_credentials("elixir", "elixir")
        version = await api.call("apiinfo.version")
        hosts = await api.call(
            "host.get", {"hostids": [10001, 10042], "output": ["name"]}
        )
        await api.logout()
"""

from __future__ import annotations

import logging
from enum import Enum
from types import TracebackType
from typing import Any

import aiohttp

from .config import ClientConfig
from .errors import ZabbixAPIError, ZabbixUnauthorizedError
from .http import DEFAULT_TIMEOUT_MS, ZabbixHttpClient
from .session import AuthState, ZabbixSession

_LOGGER = logging.getLogger(__name__)


class LogoutResult(Enum):
    """Outcome of a successful logout."""

    DEAUTHORIZED = "deauthorized"


def _short(token: str | None) -> str:
    if not token:
        return "<none>"
    return f"{token[:8]}..."


class ZabbixAPI:
    """Session-stateful client for the Zabbix API.

    Call create_client() before anything else. Most methods need an auth
    token, obtained with login_with_credentials() or login_with_token().
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        state: ZabbixSession | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            session: Shared aiohttp session. When omitted one is created on
                the first create_client() and closed by close().
            state: Session state to use. A fresh one is created when omitted.
        """
        self._http = session
        self._owns_http = session is None
        self._state = state if state is not None else ZabbixSession()

    async def __aenter__(self) -> ZabbixAPI:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def token(self) -> str | None:
        """Current auth token."""
        return self._state.token

    @property
    def state(self) -> AuthState:
        """Current authentication state."""
        return self._state.state

    async def close(self) -> None:
        """Close the HTTP session if this facade created it.

        The session state is cleared as well, so later calls raise
        ZabbixBadClientError until create_client() is called again.
        """
        await self._state.clear()
        if self._owns_http and self._http is not None:
            await self._http.close()
            self._http = None

    async def create_client(self, url: str, timeout: int = DEFAULT_TIMEOUT_MS) -> None:
        """Configure the session for url with timeout milliseconds per request.

        Always resets the session: the token is dropped and request ids
        start over from 1.
        """
        if self._http is None:
            self._http = aiohttp.ClientSession()
        await self._state.reset(ZabbixHttpClient(self._http, url, timeout=timeout))
        _LOGGER.info("Client configured for %s (timeout %d ms)", url, timeout)

    async def call(self, method: str, params: Any = None) -> Any:
        """Call a remote method and return the decoded response body.

        The body is returned as-is; "result" and "error" members are left to
        the caller.

        Raises:
            ZabbixBadClientError: If create_client() was not called.
            ZabbixBadStatusError: If the HTTP status is not 200.
        """
        transport, envelope = await self._state.prepare(method, params)
        _LOGGER.debug("Request %d: %s", envelope["id"], method)
        return await transport.post(envelope)

    async def fetch_result(self, method: str, params: Any = None) -> Any:
        """Call a remote method and return its "result" member.

        Raises:
            ZabbixAPIError: If the response is an error envelope.
        """
        response = await self.call(method, params)
        if isinstance(response, dict) and "result" in response:
            return response["result"]
        error = response.get("error") if isinstance(response, dict) else None
        if not isinstance(error, dict):
            raise ZabbixAPIError(None, "Malformed response", response)
        raise ZabbixAPIError(
            error.get("code"), error.get("message", ""), error.get("data")
        )

    async def login_with_credentials(self, user: str, password: str) -> str:
        """Authenticate with user and password and store the granted token.

        Raises:
            ZabbixUnauthorizedError: If the response carries no result.
        """
        response = await self.call("user.login", {"user": user, "password": password})
        if not isinstance(response, dict) or "result" not in response:
            _LOGGER.warning("Login rejected for user %s", user)
            raise ZabbixUnauthorizedError(f"Login rejected for user {user}")
        token = response["result"]
        await self._state.set_token(token)
        _LOGGER.info("Logged in as %s", user)
        return token

    async def login_with_token(self, token: str) -> str:
        """Authenticate with an existing session id.

        Returns the session id reported by the server, which is what gets
        stored.

        Raises:
            ZabbixUnauthorizedError: If result.sessionid is missing.
        """
        response = await self.call("user.checkAuthentication", {"sessionid": token})
        result = response.get("result") if isinstance(response, dict) else None
        if not isinstance(result, dict) or "sessionid" not in result:
            _LOGGER.warning("Token %s rejected", _short(token))
            raise ZabbixUnauthorizedError("Session token rejected")
        sessionid = result["sessionid"]
        await self._state.set_token(sessionid)
        _LOGGER.info("Logged in with session %s", _short(sessionid))
        return sessionid

    async def logout(self) -> LogoutResult:
        """Log out and drop the stored token.

        Raises:
            ZabbixUnauthorizedError: If the server did not answer result: true.
        """
        response = await self.call("user.logout")
        if not isinstance(response, dict) or response.get("result") is not True:
            _LOGGER.warning("Logout rejected")
            raise ZabbixUnauthorizedError("Logout rejected")
        await self._state.set_token(None)
        _LOGGER.info("Logged out")
        return LogoutResult.DEAUTHORIZED

    async def connect(self, config: ClientConfig) -> None:
        """Create the client from config and log in if it carries auth."""
        await self.create_client(config.url, config.timeout)
        if config.token:
            await self.login_with_token(config.token)
        elif config.user and config.password:
            await self.login_with_credentials(config.user, config.password)
