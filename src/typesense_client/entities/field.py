"""Collection field definitions."""

from enum import StrEnum

from pydantic import BaseModel, Field as PydanticField, field_validator


class FieldType(StrEnum):
    STRING = "string"
    STRING_ARRAY = "string[]"
    INT32 = "int32"
    INT32_ARRAY = "int32[]"
    INT64 = "int64"
    INT64_ARRAY = "int64[]"
    FLOAT = "float"
    FLOAT_ARRAY = "float[]"
    BOOL = "bool"
    BOOL_ARRAY = "bool[]"
    GEOPOINT = "geopoint"
    GEOPOINT_ARRAY = "geopoint[]"
    OBJECT = "object"
    OBJECT_ARRAY = "object[]"
    IMAGE = "image"
    AUTO_STRING = "string*"  # Any string or string array
    AUTO = "auto"


class ModelConfig(BaseModel):
    """Embedding model used by an auto-embedding field."""

    model_name: str = PydanticField(..., min_length=1)
    api_key: str | None = None
    url: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    project_id: str | None = None
    indexing_prefix: str | None = None
    query_prefix: str | None = None

    model_config = {"protected_namespaces": ()}


class AutoEmbeddingConfig(BaseModel):
    """Lets the service compute embeddings from other fields.

    Attributes:
        from_fields: Source fields, sent as ``from`` on the wire
        model_config_: Embedding model, sent as ``model_config``
    """

    from_fields: list[str] = PydanticField(..., alias="from", min_length=1)
    model_config_: ModelConfig = PydanticField(..., alias="model_config")

    model_config = {"populate_by_name": True, "protected_namespaces": ()}


class Field(BaseModel):
    """A single field of a collection schema.

    Only ``name`` and ``type`` are required; everything else is left to the
    service defaults when unset.
    """

    name: str
    type: FieldType
    facet: bool | None = None
    optional: bool | None = None
    index: bool | None = None
    sort: bool | None = None
    infix: bool | None = None
    locale: str | None = None
    num_dim: int | None = PydanticField(default=None, gt=0)
    vec_dist: str | None = None
    reference: str | None = None
    embed: AutoEmbeddingConfig | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Field name cannot be empty or whitespace.")
        return value
