"""API key entities."""

from pydantic import BaseModel, Field


class Key(BaseModel):
    """API key creation request.

    Attributes:
        description: Free text shown when listing keys
        actions: Allowed actions, e.g. ``documents:search`` or ``*``
        collections: Collections (or regexes) the key applies to
        value: Explicit key value; generated by the service when omitted
        expires_at: Unix timestamp after which the key is rejected
    """

    description: str
    actions: list[str] = Field(..., min_length=1)
    collections: list[str] = Field(..., min_length=1)
    value: str | None = None
    expires_at: int | None = None


class KeyResponse(BaseModel):
    """A key as returned by the service.

    ``value`` is only present in the response to key creation; afterwards
    the service only reveals ``value_prefix``.
    """

    id: int
    description: str = ""
    actions: list[str] = Field(default_factory=list)
    collections: list[str] = Field(default_factory=list)
    value: str | None = None
    value_prefix: str | None = None
    expires_at: int | None = None

    model_config = {"frozen": True}


class ListKeysResponse(BaseModel):
    keys: list[KeyResponse] = Field(default_factory=list)


class DeleteKeyResponse(BaseModel):
    id: int
