"""Document import/export and bulk operation models."""

from enum import StrEnum

from pydantic import BaseModel


class ImportType(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    UPSERT = "upsert"
    EMPLACE = "emplace"


class ImportResponse(BaseModel):
    """Outcome of one line of a JSONL import.

    ``document`` is only present when the import was asked to return failed
    documents, ``id`` when it was asked to return ids.
    """

    success: bool
    error: str | None = None
    document: str | None = None
    id: str | None = None
    code: int | None = None

    model_config = {"frozen": True}


class ExportParameters(BaseModel):
    filter_by: str | None = None
    include_fields: str | None = None
    exclude_fields: str | None = None


class FilterDeleteResponse(BaseModel):
    num_deleted: int

    model_config = {"frozen": True}


class FilterUpdateResponse(BaseModel):
    num_updated: int

    model_config = {"frozen": True}
