"""VectorQuery entity encapsulating a vector search clause.

Typesense accepts nearest-neighbour parameters inline in the ``vector_query``
search parameter, using a compact function-like syntax::

    vec:([0.34, 0.66, 0.12, 0.68], k: 10)
    vec:([0.34, 0.66, 0.12, 0.68], k: 10, flat_search_cutoff: 20)
    vec:([], id: abcd)

The first element inside the parentheses is always the bracketed float
vector (possibly empty). Every following element is a ``key:value`` pair.
``id``, ``k`` and ``flat_search_cutoff`` are modelled explicitly, anything
else is kept verbatim in ``extra_params``.
"""

import math
import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from typesense_client.errors import (
    ConflictingVectorQueryError,
    InvalidNumericLiteralError,
    MalformedVectorQueryError,
    MalformedVectorQueryParameterError,
    MissingVectorFieldNameError,
)

_QUERY_PATTERN = re.compile(
    r"^(?P<name>[^:(]*):\s*\(\s*(?P<vector>\[[^\]]*\])(?P<params>[^)]*)\)$",
    re.DOTALL,
)
_INT_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
_FLOAT_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)

ID_PARAM = "id"
K_PARAM = "k"
FLAT_SEARCH_CUTOFF_PARAM = "flat_search_cutoff"
RESERVED_PARAMS = frozenset({ID_PARAM, K_PARAM, FLAT_SEARCH_CUTOFF_PARAM})

# Characters that would break the clause when rendered inside a parameter.
_PARAM_DELIMITERS = (",", ":", ")")
_FIELD_NAME_DELIMITERS = (":", "(")


def _parse_int(name: str, raw: str, query: str) -> int:
    if not _INT_PATTERN.match(raw):
        raise InvalidNumericLiteralError(
            f"Malformed vector query string: {name} value is not an integer.",
            parameter=name,
            value=raw,
            query=query,
        )
    return int(raw)


def _parse_float(raw: str, query: str) -> float:
    if not _FLOAT_PATTERN.match(raw):
        raise InvalidNumericLiteralError(
            "Malformed vector query string: one of the vector values is not a float.",
            parameter="vector",
            value=raw,
            query=query,
        )
    return float(raw)


def _check_param_text(key: str, value: str, query: str | None = None) -> None:
    if not key or not value:
        raise MalformedVectorQueryParameterError(
            f"Malformed vector query string at parameter '{key}:{value}': "
            "key and value must be non-empty.",
            parameter=key,
            query=query,
        )
    if key != key.strip() or value != value.strip():
        raise MalformedVectorQueryParameterError(
            f"Malformed vector query string at parameter '{key}:{value}': "
            "key and value cannot have leading or trailing whitespace.",
            parameter=key,
            query=query,
        )
    for text in (key, value):
        if any(d in text for d in _PARAM_DELIMITERS):
            raise MalformedVectorQueryParameterError(
                f"Malformed vector query string at parameter '{key}:{value}': "
                f"keys and values cannot contain any of {' '.join(_PARAM_DELIMITERS)}.",
                parameter=key,
                query=query,
            )


def _check_invariants(
    vector_field_name: str,
    vector: Sequence[float],
    id: str | None,
    query: str | None = None,
) -> None:
    if not vector_field_name or not vector_field_name.strip():
        raise MissingVectorFieldNameError(
            "Malformed vector query string: it is missing the vector field name.",
            query=query,
        )
    if vector and id is not None:
        raise ConflictingVectorQueryError(
            "Malformed vector query string: cannot pass both vector query and `id` parameter.",
            query=query,
        )
    if not vector and id is None:
        raise ConflictingVectorQueryError(
            "When a vector query value is empty, an `id` parameter must be present.",
            query=query,
        )


class VectorQuery(BaseModel):
    """A single vector search clause.

    Build one directly from typed values, or from raw clause text with
    :meth:`parse`. Either way all invariants are checked up front and the
    instance is immutable afterwards: ``extra_params`` is a read-only mapping,
    so equal queries hash equally. Text fields are taken as given; padding
    whitespace is rejected rather than trimmed.

    Attributes:
        vector: Query vector, empty when searching by document ``id``
        vector_field_name: Name of the indexed vector field
        id: Document id for "find similar" queries
        k: Number of nearest neighbours to return
        flat_search_cutoff: Result count below which the HNSW index is
            bypassed in favour of brute-force ranking
        extra_params: Any other parameters, rendered verbatim

    Example:
        >>> q = VectorQuery([0.34, 0.66], "vec", k=10)
        >>> q.to_query()
        'vec:([0.34,0.66],k:10)'
        >>> VectorQuery.parse("vec:([], id: abcd)").id
        'abcd'
    """

    vector: tuple[float, ...] = ()
    vector_field_name: str
    id: str | None = None
    k: int | None = None
    flat_search_cutoff: int | None = None
    extra_params: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    model_config = {
        "frozen": True,
    }

    def __init__(
        self,
        vector: Sequence[float] = (),
        vector_field_name: str = "",
        **data: Any,
    ) -> None:
        super().__init__(vector=vector, vector_field_name=vector_field_name, **data)

    def __hash__(self) -> int:
        return hash((
            self.vector,
            self.vector_field_name,
            self.id,
            self.k,
            self.flat_search_cutoff,
            frozenset(self.extra_params.items()),
        ))

    @field_validator("extra_params")
    @classmethod
    def _freeze_extra_params(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("extra_params")
    def _serialize_extra_params(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @model_validator(mode="after")
    def _validate(self) -> "VectorQuery":
        _check_invariants(self.vector_field_name, self.vector, self.id)

        if any(d in self.vector_field_name for d in _FIELD_NAME_DELIMITERS):
            raise MalformedVectorQueryError(
                f"The vector field name '{self.vector_field_name}' cannot contain ':' or '('."
            )
        if self.vector_field_name != self.vector_field_name.strip():
            raise MalformedVectorQueryError(
                f"The vector field name '{self.vector_field_name}' "
                "cannot have leading or trailing whitespace."
            )

        for value in self.vector:
            if not math.isfinite(value):
                raise InvalidNumericLiteralError(
                    "Vector values must be finite floats.",
                    parameter="vector",
                    value=repr(value),
                )

        if self.id is not None:
            _check_param_text(ID_PARAM, self.id)

        for key, value in self.extra_params.items():
            if key in RESERVED_PARAMS:
                raise MalformedVectorQueryParameterError(
                    f"'{key}' must be passed as its own argument, not through extra_params.",
                    parameter=key,
                )
            _check_param_text(key, value)

        return self

    @classmethod
    def parse(cls, query: str) -> "VectorQuery":
        """Parse a raw vector query clause.

        Args:
            query: Clause text, e.g. ``"vec:([0.96, 0.94], k:100)"``

        Returns:
            A validated VectorQuery

        Raises:
            MalformedVectorQueryError: The ``name:([...], ...)`` shape is absent
            MissingVectorFieldNameError: The field name is empty
            MalformedVectorQueryParameterError: A parameter is not ``key:value``
            InvalidNumericLiteralError: A vector element, ``k`` or
                ``flat_search_cutoff`` is not numeric
            ConflictingVectorQueryError: Both or neither of vector and ``id``
        """
        match = _QUERY_PATTERN.match(query.strip())
        if not match:
            raise MalformedVectorQueryError("Malformed vector query string.", query=query)

        vector_field_name = match.group("name").strip()
        if not vector_field_name:
            raise MissingVectorFieldNameError(
                "Malformed vector query string: it is missing the vector field name.",
                query=query,
            )

        # The first parameter MUST be the bracketed float array
        raw_vector = match.group("vector")[1:-1].strip()
        vector: list[float] = []
        if raw_vector:
            vector = [_parse_float(x.strip(), query) for x in raw_vector.split(",")]

        raw_params = match.group("params").strip()
        if raw_params and not raw_params.startswith(","):
            raise MalformedVectorQueryError(
                "Malformed vector query string: parameters must follow the vector after a comma.",
                query=query,
            )

        id: str | None = None
        k: int | None = None
        flat_search_cutoff: int | None = None
        extra_params: dict[str, str] = {}
        seen: set[str] = set()

        for param in (p.strip() for p in raw_params.split(",")):
            if not param:
                continue

            kvp = [part.strip() for part in param.split(":")]
            if len(kvp) != 2:
                raise MalformedVectorQueryParameterError(
                    f"Malformed vector query string at parameter '{param}'.",
                    parameter=param,
                    query=query,
                )

            key, value = kvp
            _check_param_text(key, value, query)
            if key in seen:
                raise MalformedVectorQueryParameterError(
                    f"Malformed vector query string: parameter '{key}' is given more than once.",
                    parameter=key,
                    query=query,
                )
            seen.add(key)

            if key == ID_PARAM:
                id = value
            elif key == K_PARAM:
                k = _parse_int(K_PARAM, value, query)
            elif key == FLAT_SEARCH_CUTOFF_PARAM:
                flat_search_cutoff = _parse_int(FLAT_SEARCH_CUTOFF_PARAM, value, query)
            else:
                extra_params[key] = value

        _check_invariants(vector_field_name, vector, id, query)

        return cls(
            vector=vector,
            vector_field_name=vector_field_name,
            id=id,
            k=k,
            flat_search_cutoff=flat_search_cutoff,
            extra_params=extra_params,
        )

    def to_query(self) -> str:
        """Render the clause in the form Typesense expects.

        The vector is always emitted, even when empty, followed by ``id``,
        ``k``, ``flat_search_cutoff`` and the extra parameters in that order.
        """
        # Float vector is required, even if empty
        parts = ["[" + ",".join(repr(value) for value in self.vector) + "]"]

        if self.id is not None:
            parts.append(f"{ID_PARAM}:{self.id}")
        if self.k is not None:
            parts.append(f"{K_PARAM}:{self.k}")
        if self.flat_search_cutoff is not None:
            parts.append(f"{FLAT_SEARCH_CUTOFF_PARAM}:{self.flat_search_cutoff}")

        parts.extend(f"{key}:{value}" for key, value in self.extra_params.items())

        return f"{self.vector_field_name}:({','.join(parts)})"

    def __str__(self) -> str:
        return self.to_query()
