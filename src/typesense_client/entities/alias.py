"""Collection alias entities."""

from pydantic import BaseModel, Field


class CollectionAlias(BaseModel):
    """Alias upsert request pointing at a concrete collection."""

    collection_name: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": True}


class CollectionAliasResponse(BaseModel):
    name: str
    collection_name: str

    model_config = {"frozen": True}


class ListCollectionAliasesResponse(BaseModel):
    aliases: list[CollectionAliasResponse] = Field(default_factory=list)
