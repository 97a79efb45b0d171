"""Scoped search key generation.

A scoped search key embeds search parameters (e.g. a mandatory ``filter_by``)
into a key derived from a parent search key, without a round trip to the
service. The service recomputes the HMAC to verify it.
"""

import base64
import hashlib
import hmac
import json
from typing import Any


def generate_scoped_search_key(security_key: str, parameters: str | dict[str, Any]) -> str:
    """Derive a scoped search key.

    Args:
        security_key: Parent key; must only allow ``documents:search``
        parameters: Embedded search parameters, as a JSON string or a dict

    Returns:
        The base64 encoded scoped key

    Raises:
        ValueError: If the key or the parameters are blank
    """
    if not security_key or not security_key.strip():
        raise ValueError("security_key cannot be null, empty or whitespace.")
    if isinstance(parameters, dict):
        parameters = json.dumps(parameters, separators=(",", ":"))
    if not parameters or not parameters.strip():
        raise ValueError("parameters cannot be null, empty or whitespace.")

    hash_ = hmac.new(security_key.encode("utf-8"), parameters.encode("utf-8"), hashlib.sha256).digest()
    digest = base64.b64encode(hash_).decode("ascii")
    key_prefix = security_key[:4]
    raw_scoped_key = f"{digest}{key_prefix}{parameters}"

    return base64.b64encode(raw_scoped_key.encode("utf-8")).decode("ascii")
