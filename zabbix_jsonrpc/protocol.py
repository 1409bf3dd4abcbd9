"""Request envelope helpers for the Zabbix JSON-RPC API."""

from __future__ import annotations

from typing import Any, Final

JSONRPC_VERSION: Final = "2.0"

# Methods the API accepts without an auth token.
BOOTSTRAP_METHODS: Final = frozenset(
    {"apiinfo.version", "user.login", "user.checkAuthentication"}
)


def requires_auth(method: str) -> bool:
    """Return True when method must carry the session token."""
    return method not in BOOTSTRAP_METHODS


def build_request(
    *,
    request_id: int,
    method: str,
    params: Any = None,
    token: str | None = None,
) -> dict[str, Any]:
    """Build a JSON-RPC request envelope.

    Args:
        request_id: Session-unique request identifier.
        method: Remote method name (e.g., "host.get").
        params: JSON-serializable parameters. Defaults to an empty object.
        token: Current session token. Ignored for bootstrap methods and
            passed through as-is otherwise, including None.

    Returns:
        Envelope dict. The "auth" member is always present.
    """
    return {
        "id": request_id,
        "auth": token if requires_auth(method) else None,
        "method": method,
        "params": {} if params is None else params,
        "jsonrpc": JSONRPC_VERSION,
    }
