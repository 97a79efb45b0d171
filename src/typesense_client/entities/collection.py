"""Collection schema and collection responses."""

from pydantic import BaseModel, Field as PydanticField, model_validator

from .field import Field, FieldType


class Schema(BaseModel):
    """Schema sent when creating a collection."""

    name: str = PydanticField(..., min_length=1)
    fields: list[Field]
    default_sorting_field: str | None = None
    token_separators: list[str] | None = None
    symbols_to_index: list[str] | None = None
    enable_nested_fields: bool | None = None


class CollectionResponse(BaseModel):
    """A collection as reported by the service."""

    name: str
    num_documents: int = 0
    fields: list[Field] = PydanticField(default_factory=list)
    default_sorting_field: str = ""
    token_separators: list[str] = PydanticField(default_factory=list)
    symbols_to_index: list[str] = PydanticField(default_factory=list)
    enable_nested_fields: bool = False
    created_at: int | None = None

    model_config = {"frozen": True}


class UpdateSchemaField(Field):
    """A field in a schema update; set ``drop`` to remove the field."""

    type: FieldType | None = None
    drop: bool | None = None

    @model_validator(mode="after")
    def _check_drop(self) -> "UpdateSchemaField":
        if not self.drop:
            if self.type is None:
                raise ValueError("A field that is not dropped needs a type.")
            return self
        # A dropped field is sent as {"name": ..., "drop": true} only
        if any(
            getattr(self, attr) is not None
            for attr in ("type", "facet", "optional", "index", "sort", "infix", "locale", "num_dim", "embed")
        ):
            raise ValueError("A dropped field cannot carry other field options.")
        return self

    @classmethod
    def dropped(cls, name: str) -> "UpdateSchemaField":
        return cls(name=name, drop=True)


class UpdateSchema(BaseModel):
    fields: list[UpdateSchemaField] = PydanticField(..., min_length=1)


class UpdateCollectionResponse(BaseModel):
    fields: list[UpdateSchemaField] = PydanticField(default_factory=list)

    model_config = {"frozen": True}


class TruncateCollectionResponse(BaseModel):
    num_deleted: int

    model_config = {"frozen": True}
