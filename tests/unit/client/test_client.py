"""
Tests for TypesenseClient HTTP plumbing.

These tests verify:
- Base URL and API key header setup
- Mapping of non-2xx responses onto ApiError subclasses
- Wrapping of transport failures
- Decoding failures
"""

import httpx
import pytest

from typesense_client.client import API_KEY_HEADER, TypesenseClient
from typesense_client.entities.collection import Schema
from typesense_client.entities.field import Field, FieldType
from typesense_client.errors import (
    ApiConnectionError,
    BadRequestError,
    ConflictError,
    NotFoundError,
    ResponseDecodeError,
    ServerError,
    ServiceUnavailableError,
    UnauthorizedError,
    is_retryable,
)


class TestClientSetup:

    def test_sets_base_url_and_api_key(self, make_client, json_response, collection_payload):
        client, sent = make_client(json_response(collection_payload))
        client.retrieve_collection("companies")

        request = sent[0]
        assert str(request.url) == "http://localhost:8108/collections/companies"
        assert request.headers[API_KEY_HEADER] == "test-api-key"

    def test_owns_default_http_client(self, client_config):
        client = TypesenseClient(client_config)
        assert client._owns_http_client is True
        with client:
            pass
        assert client._http.is_closed

    def test_does_not_close_injected_client(self, client_config):
        http_client = httpx.Client()
        with TypesenseClient(client_config, http_client=http_client):
            pass
        assert not http_client.is_closed
        http_client.close()

    def test_rejects_missing_config(self):
        with pytest.raises(ValueError):
            TypesenseClient(None)


class TestErrorMapping:

    @pytest.mark.parametrize(
        "status_code,error_cls",
        [
            (400, BadRequestError),
            (401, UnauthorizedError),
            (404, NotFoundError),
            (409, ConflictError),
            (503, ServiceUnavailableError),
        ],
    )
    def test_status_codes(self, make_client, json_response, status_code, error_cls):
        client, _ = make_client(json_response({"message": "Nope."}, status_code))
        with pytest.raises(error_cls) as exc_info:
            client.retrieve_collection("companies")
        assert exc_info.value.message == "Nope."
        assert exc_info.value.status_code == status_code

    def test_non_json_error_body(self, make_client):
        client, _ = make_client(lambda request: httpx.Response(500, text="upstream exploded"))
        with pytest.raises(ServerError) as exc_info:
            client.retrieve_health()
        assert exc_info.value.message == "upstream exploded"
        assert is_retryable(exc_info.value)

    def test_conflict_on_create(self, make_client, json_response):
        client, _ = make_client(json_response({"message": "A collection with name `companies` already exists."}, 409))
        schema = Schema(name="companies", fields=[Field(name="name", type=FieldType.STRING)])
        with pytest.raises(ConflictError, match="already exists"):
            client.create_collection(schema)

    def test_transport_error_is_wrapped(self, make_client):
        def _fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(_fail)
        with pytest.raises(ApiConnectionError) as exc_info:
            client.retrieve_health()
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)
        assert is_retryable(exc_info.value)

    def test_timeout_is_wrapped(self, make_client):
        def _timeout(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client, _ = make_client(_timeout)
        with pytest.raises(ApiConnectionError) as exc_info:
            client.retrieve_health()
        assert exc_info.value.details["timeout"] == 10.0


class TestDecoding:

    def test_empty_body(self, make_client):
        client, _ = make_client(lambda request: httpx.Response(200, content=b""))
        with pytest.raises(ResponseDecodeError, match="Empty JSON"):
            client.retrieve_health()

    def test_invalid_json(self, make_client):
        client, _ = make_client(lambda request: httpx.Response(200, text="{not json"))
        with pytest.raises(ResponseDecodeError):
            client.retrieve_health()

    def test_unexpected_shape(self, make_client, json_response):
        client, _ = make_client(json_response({"healthy": "maybe"}))
        with pytest.raises(ResponseDecodeError, match="HealthResponse"):
            client.retrieve_health()
