import base64
import hashlib
import hmac
import json

import pytest

from typesense_client.utils.scoped_key import generate_scoped_search_key

SEARCH_KEY = "RN23GFr1s6jQ9kgSNg2O7fYcAUXU7127"
PARAMS = '{"filter_by":"company_id:124","expires_at":1906054106}'


def _decode(scoped_key: str) -> str:
    return base64.b64decode(scoped_key).decode("utf-8")


def test_scoped_key_layout():
    raw = _decode(generate_scoped_search_key(SEARCH_KEY, PARAMS))

    expected_digest = base64.b64encode(
        hmac.new(SEARCH_KEY.encode(), PARAMS.encode(), hashlib.sha256).digest()
    ).decode()
    assert raw == f"{expected_digest}RN23{PARAMS}"


def test_dict_parameters_are_dumped_compactly():
    params = {"filter_by": "company_id:124", "expires_at": 1906054106}
    assert generate_scoped_search_key(SEARCH_KEY, params) == generate_scoped_search_key(SEARCH_KEY, PARAMS)
    assert _decode(generate_scoped_search_key(SEARCH_KEY, params)).endswith(json.dumps(params, separators=(",", ":")))


def test_is_deterministic_and_key_dependent():
    assert generate_scoped_search_key(SEARCH_KEY, PARAMS) == generate_scoped_search_key(SEARCH_KEY, PARAMS)
    assert generate_scoped_search_key(SEARCH_KEY, PARAMS) != generate_scoped_search_key("other-key", PARAMS)


@pytest.mark.parametrize("key,params", [("", PARAMS), ("   ", PARAMS), (SEARCH_KEY, ""), (SEARCH_KEY, "  ")])
def test_blank_inputs(key, params):
    with pytest.raises(ValueError):
        generate_scoped_search_key(key, params)
