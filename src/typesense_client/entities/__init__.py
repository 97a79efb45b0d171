"""Typed request and response entities."""

from .alias import CollectionAlias, CollectionAliasResponse, ListCollectionAliasesResponse
from .cluster import (
    CompactDiskResponse,
    HealthResponse,
    MetricsResponse,
    SnapshotResponse,
    StatsResponse,
)
from .collection import (
    CollectionResponse,
    Schema,
    TruncateCollectionResponse,
    UpdateCollectionResponse,
    UpdateSchema,
    UpdateSchemaField,
)
from .document import (
    ExportParameters,
    FilterDeleteResponse,
    FilterUpdateResponse,
    ImportResponse,
    ImportType,
)
from .field import AutoEmbeddingConfig, Field, FieldType, ModelConfig
from .key import DeleteKeyResponse, Key, KeyResponse, ListKeysResponse
from .override import (
    DeleteSearchOverrideResponse,
    Exclude,
    Include,
    ListSearchOverridesResponse,
    Rule,
    SearchOverride,
    SearchOverrideResponse,
)
from .search import (
    FacetCount,
    FacetCountValue,
    GroupedHit,
    Highlight,
    Hit,
    MultiSearchParameters,
    MultiSearchResult,
    SearchGroupedResult,
    SearchParameters,
    SearchResult,
)
from .synonym import (
    DeleteSynonymResponse,
    ListSynonymsResponse,
    SynonymSchema,
    SynonymSchemaResponse,
)
from .vector_query import VectorQuery

__all__ = [
    "VectorQuery",
    # Collections
    "Field",
    "FieldType",
    "AutoEmbeddingConfig",
    "ModelConfig",
    "Schema",
    "CollectionResponse",
    "UpdateSchema",
    "UpdateSchemaField",
    "UpdateCollectionResponse",
    "TruncateCollectionResponse",
    # Documents
    "ImportType",
    "ImportResponse",
    "ExportParameters",
    "FilterDeleteResponse",
    "FilterUpdateResponse",
    # Search
    "SearchParameters",
    "MultiSearchParameters",
    "Highlight",
    "Hit",
    "FacetCount",
    "FacetCountValue",
    "GroupedHit",
    "SearchResult",
    "SearchGroupedResult",
    "MultiSearchResult",
    # Keys
    "Key",
    "KeyResponse",
    "ListKeysResponse",
    "DeleteKeyResponse",
    # Aliases
    "CollectionAlias",
    "CollectionAliasResponse",
    "ListCollectionAliasesResponse",
    # Synonyms
    "SynonymSchema",
    "SynonymSchemaResponse",
    "ListSynonymsResponse",
    "DeleteSynonymResponse",
    # Overrides
    "Rule",
    "Include",
    "Exclude",
    "SearchOverride",
    "SearchOverrideResponse",
    "ListSearchOverridesResponse",
    "DeleteSearchOverrideResponse",
    # Cluster
    "HealthResponse",
    "SnapshotResponse",
    "CompactDiskResponse",
    "StatsResponse",
    "MetricsResponse",
]
