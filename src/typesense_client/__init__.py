"""
typesense-client - A typed Python client for the Typesense search service.

This package builds requests for collection management, document CRUD,
bulk import/export, search and cluster operations, and maps the JSON
responses onto pydantic models.
"""

__version__ = "0.1.0"

# Client
from .client import TypesenseClient

# Configuration
from .config import ClientConfig, Node, Settings, load_settings

# Entities
from .entities import (
    CollectionAlias,
    CollectionResponse,
    ExportParameters,
    Field,
    FieldType,
    ImportType,
    Key,
    MultiSearchParameters,
    Schema,
    SearchOverride,
    SearchParameters,
    SearchResult,
    SynonymSchema,
    UpdateSchema,
    UpdateSchemaField,
    VectorQuery,
)

# Errors
from .errors import (
    ApiError,
    ConfigurationError,
    TypesenseError,
    VectorQueryError,
    is_retryable,
)

# Utilities
from .utils import generate_scoped_search_key

__all__ = [
    # Version
    "__version__",
    # Client
    "TypesenseClient",
    # Configuration
    "ClientConfig",
    "Node",
    "Settings",
    "load_settings",
    # Entities
    "VectorQuery",
    "Field",
    "FieldType",
    "Schema",
    "UpdateSchema",
    "UpdateSchemaField",
    "CollectionResponse",
    "ImportType",
    "ExportParameters",
    "SearchParameters",
    "MultiSearchParameters",
    "SearchResult",
    "Key",
    "CollectionAlias",
    "SynonymSchema",
    "SearchOverride",
    # Errors
    "TypesenseError",
    "VectorQueryError",
    "ApiError",
    "ConfigurationError",
    "is_retryable",
    # Utilities
    "generate_scoped_search_key",
]
