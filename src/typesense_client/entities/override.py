"""Search override (curation) entities."""

from pydantic import BaseModel, Field


class Exclude(BaseModel):
    id: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": True}


class Include(BaseModel):
    id: str = Field(..., min_length=1)
    position: int = Field(..., ge=1)

    model_config = {"str_strip_whitespace": True}


class Rule(BaseModel):
    """When an override applies.

    Attributes:
        query: Query text to match
        match: ``exact`` or ``contains``
    """

    query: str = Field(..., min_length=1)
    match: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": True}


class SearchOverride(BaseModel):
    rule: Rule
    includes: list[Include] | None = None
    excludes: list[Exclude] | None = None
    filter_by: str | None = None
    remove_matched_tokens: bool | None = None


class SearchOverrideResponse(SearchOverride):
    id: str

    model_config = {"frozen": True}


class ListSearchOverridesResponse(BaseModel):
    overrides: list[SearchOverrideResponse] = Field(default_factory=list)


class DeleteSearchOverrideResponse(BaseModel):
    id: str
