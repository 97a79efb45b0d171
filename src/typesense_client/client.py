"""Synchronous Typesense client.

Builds requests against the Typesense REST API with ``httpx`` and maps the
JSON responses onto the typed entities of :mod:`typesense_client.entities`.
Non-2xx answers are raised as :class:`~typesense_client.errors.ApiError`
subclasses; the client never retries on its own.

Example:
    >>> config = ClientConfig(nodes=[Node(host="localhost", port="8108")], api_key="xyz")
    >>> with TypesenseClient(config) as client:
    ...     client.create_collection(schema)
    ...     result = client.search("companies", SearchParameters(q="*", vector_query="vec:([0.1, 0.2], k:10)"))
"""

import json
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from typesense_client.config.models import ClientConfig
from typesense_client.entities.alias import (
    CollectionAlias,
    CollectionAliasResponse,
    ListCollectionAliasesResponse,
)
from typesense_client.entities.cluster import (
    CompactDiskResponse,
    HealthResponse,
    MetricsResponse,
    SnapshotResponse,
    StatsResponse,
)
from typesense_client.entities.collection import (
    CollectionResponse,
    Schema,
    TruncateCollectionResponse,
    UpdateCollectionResponse,
    UpdateSchema,
)
from typesense_client.entities.document import (
    ExportParameters,
    FilterDeleteResponse,
    FilterUpdateResponse,
    ImportResponse,
    ImportType,
)
from typesense_client.entities.key import DeleteKeyResponse, Key, KeyResponse, ListKeysResponse
from typesense_client.entities.override import (
    DeleteSearchOverrideResponse,
    ListSearchOverridesResponse,
    SearchOverride,
    SearchOverrideResponse,
)
from typesense_client.entities.search import (
    MultiSearchParameters,
    MultiSearchResult,
    SearchGroupedResult,
    SearchParameters,
    SearchResult,
)
from typesense_client.entities.synonym import (
    DeleteSynonymResponse,
    ListSynonymsResponse,
    SynonymSchema,
    SynonymSchemaResponse,
)
from typesense_client.errors import (
    ApiConnectionError,
    ResponseDecodeError,
    classify_http_error,
)
from typesense_client.utils.query_params import to_query_params
from typesense_client.utils.scoped_key import generate_scoped_search_key

API_KEY_HEADER = "X-TYPESENSE-API-KEY"

M = TypeVar("M", bound=BaseModel)

Document = dict[str, Any] | BaseModel


def _require(name: str, value: str | None) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{name} cannot be null, empty or whitespace.")
    return value


def _segment(value: str | int) -> str:
    return quote(str(value), safe="")


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _document_body(document: Document) -> dict[str, Any]:
    if document is None:
        raise ValueError("document cannot be null.")
    if isinstance(document, BaseModel):
        return _dump(document)
    return document


class TypesenseClient:
    """Client for a single Typesense node.

    Args:
        config: Connection configuration; the first node is used
        http_client: Optional pre-built ``httpx.Client``. The client
            sets its base URL and API key header. It is not closed by
            :meth:`close` since the caller owns it.
    """

    def __init__(self, config: ClientConfig, http_client: httpx.Client | None = None):
        if config is None:
            raise ValueError("config cannot be null.")

        self.config = config
        self._owns_http_client = http_client is None

        if http_client is None:
            http_client = httpx.Client(timeout=config.connection_timeout_seconds)

        http_client.base_url = config.base_url
        http_client.headers[API_KEY_HEADER] = config.api_key
        self._http = http_client

        logger.debug(f"TypesenseClient initialized for {config.base_url}")

    def __enter__(self) -> "TypesenseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def create_collection(self, schema: Schema) -> CollectionResponse:
        if schema is None:
            raise ValueError("schema cannot be null.")
        response = self._request("POST", "/collections", json=_dump(schema))
        return self._parse(response, CollectionResponse)

    def retrieve_collection(self, name: str) -> CollectionResponse:
        _require("name", name)
        response = self._request("GET", f"/collections/{_segment(name)}")
        return self._parse(response, CollectionResponse)

    def retrieve_collections(self) -> list[CollectionResponse]:
        response = self._request("GET", "/collections")
        return [self._validate(item, CollectionResponse) for item in self._json(response)]

    def update_collection(self, name: str, update_schema: UpdateSchema) -> UpdateCollectionResponse:
        _require("name", name)
        if update_schema is None:
            raise ValueError("update_schema cannot be null.")
        response = self._request("PATCH", f"/collections/{_segment(name)}", json=_dump(update_schema))
        return self._parse(response, UpdateCollectionResponse)

    def delete_collection(self, name: str) -> CollectionResponse:
        _require("name", name)
        response = self._request("DELETE", f"/collections/{_segment(name)}")
        return self._parse(response, CollectionResponse)

    def truncate_collection(self, name: str) -> TruncateCollectionResponse:
        """Delete every document while keeping the collection and its schema."""
        _require("name", name)
        response = self._request(
            "DELETE",
            f"/collections/{_segment(name)}/documents",
            params={"truncate": "true"},
        )
        return self._parse(response, TruncateCollectionResponse)

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def create_document(self, collection: str, document: Document) -> dict[str, Any]:
        _require("collection", collection)
        response = self._request(
            "POST",
            f"/collections/{_segment(collection)}/documents",
            json=_document_body(document),
        )
        return self._json(response)

    def upsert_document(self, collection: str, document: Document) -> dict[str, Any]:
        _require("collection", collection)
        response = self._request(
            "POST",
            f"/collections/{_segment(collection)}/documents",
            params={"action": "upsert"},
            json=_document_body(document),
        )
        return self._json(response)

    def retrieve_document(self, collection: str, id: str) -> dict[str, Any]:
        _require("collection", collection)
        _require("id", id)
        response = self._request("GET", f"/collections/{_segment(collection)}/documents/{_segment(id)}")
        return self._json(response)

    def update_document(self, collection: str, id: str, document: Document) -> dict[str, Any]:
        """Partially update a document; only the given fields change."""
        _require("collection", collection)
        _require("id", id)
        response = self._request(
            "PATCH",
            f"/collections/{_segment(collection)}/documents/{_segment(id)}",
            json=_document_body(document),
        )
        return self._json(response)

    def delete_document(self, collection: str, id: str) -> dict[str, Any]:
        _require("collection", collection)
        _require("id", id)
        response = self._request("DELETE", f"/collections/{_segment(collection)}/documents/{_segment(id)}")
        return self._json(response)

    def delete_documents(self, collection: str, filter_by: str, batch_size: int = 40) -> FilterDeleteResponse:
        _require("collection", collection)
        _require("filter_by", filter_by)
        if batch_size < 1:
            raise ValueError("batch_size has to be greater than 0.")
        response = self._request(
            "DELETE",
            f"/collections/{_segment(collection)}/documents",
            params=to_query_params(filter_by=filter_by, batch_size=batch_size),
        )
        return self._parse(response, FilterDeleteResponse)

    def update_documents(self, collection: str, document: Document, filter_by: str) -> FilterUpdateResponse:
        """Apply the same partial update to every document matching ``filter_by``."""
        _require("collection", collection)
        _require("filter_by", filter_by)
        response = self._request(
            "PATCH",
            f"/collections/{_segment(collection)}/documents",
            params=to_query_params(filter_by=filter_by),
            json=_document_body(document),
        )
        return self._parse(response, FilterUpdateResponse)

    def import_documents(
        self,
        collection: str,
        documents: list[Document],
        batch_size: int = 40,
        import_type: ImportType = ImportType.CREATE,
    ) -> list[ImportResponse]:
        """Bulk import documents as JSON lines.

        The service answers 200 even when individual documents fail; check
        ``success`` on each returned ImportResponse.
        """
        _require("collection", collection)
        if documents is None:
            raise ValueError("documents cannot be null.")
        if not documents:
            logger.debug(f"Nothing to import into '{collection}'")
            return []

        body = "\n".join(json.dumps(_document_body(doc)) for doc in documents)
        response = self._request(
            "POST",
            f"/collections/{_segment(collection)}/documents/import",
            params=to_query_params(batch_size=batch_size, action=ImportType(import_type).value),
            content=body.encode("utf-8"),
            headers={"Content-Type": "text/plain"},
        )
        return [self._validate(line, ImportResponse) for line in self._json_lines(response)]

    def export_documents(
        self, collection: str, parameters: ExportParameters | None = None
    ) -> list[dict[str, Any]]:
        _require("collection", collection)
        response = self._request(
            "GET",
            f"/collections/{_segment(collection)}/documents/export",
            params=to_query_params(parameters or ExportParameters()),
        )
        return self._json_lines(response)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, collection: str, parameters: SearchParameters) -> SearchResult:
        _require("collection", collection)
        if parameters is None:
            raise ValueError("parameters cannot be null.")
        response = self._search(collection, parameters)
        return self._parse(response, SearchResult)

    def search_grouped(self, collection: str, parameters: SearchParameters) -> SearchGroupedResult:
        _require("collection", collection)
        if parameters is None:
            raise ValueError("parameters cannot be null.")
        _require("group_by", parameters.group_by)
        response = self._search(collection, parameters)
        return self._parse(response, SearchGroupedResult)

    def multi_search(
        self,
        searches: list[MultiSearchParameters],
        limit_multi_searches: int | None = None,
    ) -> list[MultiSearchResult]:
        """Run several searches in one request.

        Results come back in the order of ``searches``. A failing search
        is reported in its own MultiSearchResult rather than raised.
        """
        if not searches:
            raise ValueError("searches cannot be null or empty.")
        response = self._request(
            "POST",
            "/multi_search",
            params=to_query_params(limit_multi_searches=limit_multi_searches),
            json={"searches": [_dump(search) for search in searches]},
        )
        data = self._json(response)
        if not isinstance(data, dict):
            raise ResponseDecodeError("Multi-search response is not a JSON object.")
        return [self._validate(item, MultiSearchResult) for item in data.get("results", [])]

    def _search(self, collection: str, parameters: SearchParameters) -> httpx.Response:
        return self._request(
            "GET",
            f"/collections/{_segment(collection)}/documents/search",
            params=to_query_params(parameters),
        )

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def create_key(self, key: Key) -> KeyResponse:
        if key is None:
            raise ValueError("key cannot be null.")
        response = self._request("POST", "/keys", json=_dump(key))
        return self._parse(response, KeyResponse)

    def retrieve_key(self, id: int) -> KeyResponse:
        response = self._request("GET", f"/keys/{_segment(id)}")
        return self._parse(response, KeyResponse)

    def delete_key(self, id: int) -> DeleteKeyResponse:
        response = self._request("DELETE", f"/keys/{_segment(id)}")
        return self._parse(response, DeleteKeyResponse)

    def list_keys(self) -> ListKeysResponse:
        response = self._request("GET", "/keys")
        return self._parse(response, ListKeysResponse)

    @staticmethod
    def generate_scoped_search_key(security_key: str, parameters: str | dict[str, Any]) -> str:
        return generate_scoped_search_key(security_key, parameters)

    # ------------------------------------------------------------------
    # Search overrides
    # ------------------------------------------------------------------

    def upsert_search_override(
        self, collection: str, override_name: str, search_override: SearchOverride
    ) -> SearchOverrideResponse:
        _require("collection", collection)
        _require("override_name", override_name)
        if search_override is None:
            raise ValueError("search_override cannot be null.")
        response = self._request(
            "PUT",
            f"/collections/{_segment(collection)}/overrides/{_segment(override_name)}",
            json=_dump(search_override),
        )
        return self._parse(response, SearchOverrideResponse)

    def retrieve_search_override(self, collection: str, override_name: str) -> SearchOverrideResponse:
        _require("collection", collection)
        _require("override_name", override_name)
        response = self._request(
            "GET", f"/collections/{_segment(collection)}/overrides/{_segment(override_name)}"
        )
        return self._parse(response, SearchOverrideResponse)

    def list_search_overrides(self, collection: str) -> ListSearchOverridesResponse:
        _require("collection", collection)
        response = self._request("GET", f"/collections/{_segment(collection)}/overrides")
        return self._parse(response, ListSearchOverridesResponse)

    def delete_search_override(self, collection: str, override_name: str) -> DeleteSearchOverrideResponse:
        _require("collection", collection)
        _require("override_name", override_name)
        response = self._request(
            "DELETE", f"/collections/{_segment(collection)}/overrides/{_segment(override_name)}"
        )
        return self._parse(response, DeleteSearchOverrideResponse)

    # ------------------------------------------------------------------
    # Aliases
    # ------------------------------------------------------------------

    def upsert_collection_alias(self, alias_name: str, alias: CollectionAlias) -> CollectionAliasResponse:
        _require("alias_name", alias_name)
        if alias is None:
            raise ValueError("alias cannot be null.")
        response = self._request("PUT", f"/aliases/{_segment(alias_name)}", json=_dump(alias))
        return self._parse(response, CollectionAliasResponse)

    def retrieve_collection_alias(self, alias_name: str) -> CollectionAliasResponse:
        _require("alias_name", alias_name)
        response = self._request("GET", f"/aliases/{_segment(alias_name)}")
        return self._parse(response, CollectionAliasResponse)

    def list_collection_aliases(self) -> ListCollectionAliasesResponse:
        response = self._request("GET", "/aliases")
        return self._parse(response, ListCollectionAliasesResponse)

    def delete_collection_alias(self, alias_name: str) -> CollectionAliasResponse:
        _require("alias_name", alias_name)
        response = self._request("DELETE", f"/aliases/{_segment(alias_name)}")
        return self._parse(response, CollectionAliasResponse)

    # ------------------------------------------------------------------
    # Synonyms
    # ------------------------------------------------------------------

    def upsert_synonym(self, collection: str, synonym: str, schema: SynonymSchema) -> SynonymSchemaResponse:
        _require("collection", collection)
        _require("synonym", synonym)
        if schema is None:
            raise ValueError("schema cannot be null.")
        response = self._request(
            "PUT",
            f"/collections/{_segment(collection)}/synonyms/{_segment(synonym)}",
            json=_dump(schema),
        )
        return self._parse(response, SynonymSchemaResponse)

    def retrieve_synonym(self, collection: str, synonym: str) -> SynonymSchemaResponse:
        _require("collection", collection)
        _require("synonym", synonym)
        response = self._request("GET", f"/collections/{_segment(collection)}/synonyms/{_segment(synonym)}")
        return self._parse(response, SynonymSchemaResponse)

    def list_synonyms(self, collection: str) -> ListSynonymsResponse:
        _require("collection", collection)
        response = self._request("GET", f"/collections/{_segment(collection)}/synonyms")
        return self._parse(response, ListSynonymsResponse)

    def delete_synonym(self, collection: str, synonym: str) -> DeleteSynonymResponse:
        _require("collection", collection)
        _require("synonym", synonym)
        response = self._request(
            "DELETE", f"/collections/{_segment(collection)}/synonyms/{_segment(synonym)}"
        )
        return self._parse(response, DeleteSynonymResponse)

    # ------------------------------------------------------------------
    # Cluster operations
    # ------------------------------------------------------------------

    def retrieve_health(self) -> HealthResponse:
        response = self._request("GET", "/health")
        return self._parse(response, HealthResponse)

    def retrieve_metrics(self) -> MetricsResponse:
        response = self._request("GET", "/metrics.json")
        return self._parse(response, MetricsResponse)

    def retrieve_stats(self) -> StatsResponse:
        response = self._request("GET", "/stats.json")
        return self._parse(response, StatsResponse)

    def create_snapshot(self, snapshot_path: str) -> SnapshotResponse:
        _require("snapshot_path", snapshot_path)
        response = self._request("POST", "/operations/snapshot", params={"snapshot_path": snapshot_path})
        return self._parse(response, SnapshotResponse)

    def compact_disk(self) -> CompactDiskResponse:
        response = self._request("POST", "/operations/db/compact")
        return self._parse(response, CompactDiskResponse)

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        logger.debug(f"Typesense request: {method} {path}")
        try:
            response = self._http.request(
                method, path, params=params, json=json, content=content, headers=headers
            )
        except httpx.TimeoutException as e:
            logger.error(f"Typesense request timed out: {method} {path}: {e}")
            raise ApiConnectionError(
                f"Request timed out: {method} {path}",
                details={"timeout": self.config.connection_timeout_seconds},
                original_error=e,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Typesense request failed (network error): {method} {path}: {e}")
            raise ApiConnectionError(f"Request failed: {method} {path}", original_error=e) from e

        if not response.is_success:
            message = self._error_message(response)
            logger.warning(f"Typesense returned {response.status_code} for {method} {path}: {message}")
            raise classify_http_error(response.status_code, message)

        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        # Errors come back as {"message": "..."}
        try:
            data = response.json()
        except ValueError:
            return response.text
        if isinstance(data, dict) and "message" in data:
            return str(data["message"])
        return response.text

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if not response.content:
            raise ResponseDecodeError("Empty JSON response is not valid.")
        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError("Response is not valid JSON.", original_error=e) from e

    @staticmethod
    def _json_lines(response: httpx.Response) -> list[Any]:
        lines = []
        for line in response.text.splitlines():
            if not line.strip():
                continue
            try:
                lines.append(json.loads(line))
            except ValueError as e:
                raise ResponseDecodeError(
                    "Response line is not valid JSON.",
                    details={"line": line},
                    original_error=e,
                ) from e
        return lines

    @staticmethod
    def _validate(data: Any, model: type[M]) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"Response does not match {model.__name__}.",
                original_error=e,
            ) from e

    def _parse(self, response: httpx.Response, model: type[M]) -> M:
        return self._validate(self._json(response), model)
