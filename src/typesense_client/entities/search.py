"""Search request parameters and search result entities."""

from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from .vector_query import VectorQuery


class SearchParameters(BaseModel):
    """Parameters of a single search request.

    ``vector_query`` accepts either a :class:`VectorQuery` or the raw clause
    text, which is parsed (and validated) on assignment. It is always sent to
    the service in its textual form.

    Attributes:
        q: Query text, ``*`` matches everything
        query_by: Comma separated fields to search in
    """

    q: str = Field(..., min_length=1)
    query_by: str | None = None
    query_by_weights: str | None = None
    text_match_type: str | None = None
    prefix: bool | None = None
    infix: str | None = None
    filter_by: str | None = None
    sort_by: str | None = None
    facet_by: str | None = None
    max_facet_values: int | None = None
    facet_query: str | None = None
    num_typos: str | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=0)
    group_by: str | None = None
    group_limit: int | None = None
    include_fields: str | None = None
    exclude_fields: str | None = None
    highlight_fields: str | None = None
    highlight_full_fields: str | None = None
    highlight_affix_num_tokens: int | None = None
    highlight_start_tag: str | None = None
    highlight_end_tag: str | None = None
    snippet_threshold: int | None = None
    drop_tokens_threshold: int | None = None
    typo_tokens_threshold: int | None = None
    pinned_hits: str | None = None
    hidden_hits: str | None = None
    limit_hits: int | None = None
    pre_segmented_query: bool | None = None
    enable_overrides: bool | None = None
    prioritize_exact_match: bool | None = None
    exhaustive_search: bool | None = None
    search_cutoff_ms: int | None = None
    use_cache: bool | None = None
    cache_ttl: int | None = None
    vector_query: VectorQuery | None = None
    remote_embedding_timeout_ms: int | None = None
    remote_embedding_num_tries: int | None = None

    @field_validator("vector_query", mode="before")
    @classmethod
    def _parse_vector_query(cls, value: Any) -> Any:
        if isinstance(value, str):
            return VectorQuery.parse(value)
        return value

    @field_serializer("vector_query")
    def _serialize_vector_query(self, value: VectorQuery | None) -> str | None:
        return value.to_query() if value is not None else None


class MultiSearchParameters(SearchParameters):
    """One search of a multi-search request, bound to a collection."""

    collection: str = Field(..., min_length=1)


class Highlight(BaseModel):
    field: str
    snippet: str | None = None
    snippets: list[str] | None = None
    value: str | None = None
    values: list[str] | None = None
    indices: list[int] | None = None
    # Nested lists for array fields
    matched_tokens: list[Any] = Field(default_factory=list)


class Hit(BaseModel):
    document: dict[str, Any]
    highlights: list[Highlight] = Field(default_factory=list)
    highlight: dict[str, Any] | None = None
    text_match: int | None = None
    text_match_info: dict[str, Any] | None = None
    vector_distance: float | None = None
    geo_distance_meters: dict[str, int] | None = None


class FacetCountValue(BaseModel):
    count: int
    highlighted: str
    value: str


class FacetCount(BaseModel):
    field_name: str
    counts: list[FacetCountValue] = Field(default_factory=list)
    sampled: bool | None = None
    stats: dict[str, Any] = Field(default_factory=dict)


class GroupedHit(BaseModel):
    group_key: list[Any]
    hits: list[Hit] = Field(default_factory=list)
    found: int | None = None


class SearchResult(BaseModel):
    """Response of a search."""

    found: int
    out_of: int
    page: int
    search_time_ms: int
    hits: list[Hit] = Field(default_factory=list)
    facet_counts: list[FacetCount] = Field(default_factory=list)
    search_cutoff: bool | None = None
    request_params: dict[str, Any] | None = None


class SearchGroupedResult(BaseModel):
    """Response of a search with ``group_by`` set."""

    found: int
    out_of: int
    page: int
    search_time_ms: int
    grouped_hits: list[GroupedHit] = Field(default_factory=list)
    facet_counts: list[FacetCount] = Field(default_factory=list)
    found_docs: int | None = None
    search_cutoff: bool | None = None
    request_params: dict[str, Any] | None = None


class MultiSearchResult(BaseModel):
    """One entry of a multi-search response.

    A failed search in a multi-search does not fail the whole request; it
    carries ``error`` and ``code`` instead of results.
    """

    found: int | None = None
    out_of: int | None = None
    page: int | None = None
    search_time_ms: int | None = None
    hits: list[Hit] = Field(default_factory=list)
    grouped_hits: list[GroupedHit] | None = None
    facet_counts: list[FacetCount] = Field(default_factory=list)
    request_params: dict[str, Any] | None = None
    error: str | None = None
    code: int | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
