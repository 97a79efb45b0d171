"""Rendering of parameter models into URL query parameters."""

from typing import Any

from pydantic import BaseModel


def _render(value: Any) -> str:
    # The service expects lowercase booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_query_params(model: BaseModel | None = None, **extra: Any) -> dict[str, str]:
    """Flatten a parameter model (plus keyword extras) into query parameters.

    Unset (``None``) values are dropped. Serializers declared on the model
    are honoured, so a ``vector_query`` is rendered as clause text.

    Example:
        >>> to_query_params(ExportParameters(filter_by="num:>5"), batch_size=40)
        {'filter_by': 'num:>5', 'batch_size': '40'}
    """
    params: dict[str, Any] = {}
    if model is not None:
        params.update(model.model_dump(exclude_none=True, by_alias=True))
    params.update({k: v for k, v in extra.items() if v is not None})
    return {key: _render(value) for key, value in params.items()}
