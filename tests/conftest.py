"""Pytest configuration and global fixtures for typesense-client tests."""

from collections.abc import Callable

import httpx
import pytest

from typesense_client.client import TypesenseClient
from typesense_client.config.models import ClientConfig, Node

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(nodes=[Node(host="localhost", port="8108")], api_key="test-api-key")


@pytest.fixture
def make_client(client_config):
    """Build a TypesenseClient whose HTTP calls are answered by ``handler``.

    Returns the client and the list of requests it sent.
    """
    http_clients: list[httpx.Client] = []

    def _make(handler: Handler) -> tuple[TypesenseClient, list[httpx.Request]]:
        sent: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        http_client = httpx.Client(transport=httpx.MockTransport(_record))
        http_clients.append(http_client)
        return TypesenseClient(client_config, http_client=http_client), sent

    yield _make

    for http_client in http_clients:
        http_client.close()


@pytest.fixture
def json_response():
    """Factory for handlers answering every request with the same JSON payload."""
    def _factory(payload, status_code: int = 200) -> Handler:
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=payload)
        return _handler
    return _factory


@pytest.fixture
def collection_payload() -> dict:
    return {
        "name": "companies",
        "num_documents": 0,
        "fields": [
            {"name": "company_name", "type": "string", "facet": False, "optional": False},
            {"name": "num_employees", "type": "int32", "facet": False, "optional": False},
            {"name": "country", "type": "string", "facet": True, "optional": False},
        ],
        "default_sorting_field": "num_employees",
        "token_separators": [],
        "symbols_to_index": [],
        "enable_nested_fields": False,
        "created_at": 1690000000,
    }
