"""Synonym entities."""

from pydantic import BaseModel, Field


class SynonymSchema(BaseModel):
    """Synonym upsert request.

    Without ``root`` the synonyms are multi-way (each word is equivalent
    to every other); with ``root`` they are one-way towards the root.
    """

    synonyms: list[str] = Field(..., min_length=1)
    root: str | None = None
    locale: str | None = None
    symbols_to_index: list[str] | None = None


class SynonymSchemaResponse(BaseModel):
    id: str
    synonyms: list[str] = Field(default_factory=list)
    root: str | None = None
    locale: str | None = None
    symbols_to_index: list[str] | None = None

    model_config = {"frozen": True}


class ListSynonymsResponse(BaseModel):
    synonyms: list[SynonymSchemaResponse] = Field(default_factory=list)


class DeleteSynonymResponse(BaseModel):
    id: str
