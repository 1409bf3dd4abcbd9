"""Pytest configuration and fixtures for zabbix_jsonrpc tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from zabbix_jsonrpc import ZabbixAPI

BASE_URL = "https://zabbix.example.com"


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
async def api(mock_session: MagicMock) -> ZabbixAPI:
    """Facade configured against BASE_URL with a mocked HTTP session."""
    client = ZabbixAPI(mock_session)
    await client.create_client(BASE_URL)
    return client


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status
    response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response


def sent_envelope(mock_session: MagicMock, index: int = -1) -> dict[str, Any]:
    """Return the JSON body of a recorded POST call."""
    return mock_session.post.call_args_list[index].kwargs["json"]
