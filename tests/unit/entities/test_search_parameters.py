import pytest
from pydantic import ValidationError

from typesense_client.entities.search import MultiSearchParameters, SearchParameters
from typesense_client.entities.vector_query import VectorQuery
from typesense_client.errors import ConflictingVectorQueryError, MalformedVectorQueryError
from typesense_client.utils.query_params import to_query_params


class TestSearchParametersVectorQuery:

    def test_accepts_vector_query_instance(self):
        vq = VectorQuery([0.1, 0.2], "vec", k=10)
        params = SearchParameters(q="*", vector_query=vq)
        assert params.vector_query is vq

    def test_parses_raw_clause(self):
        params = SearchParameters(q="*", vector_query="vec:([0.34, 0.66], k: 10)")
        assert isinstance(params.vector_query, VectorQuery)
        assert params.vector_query.k == 10

    def test_parses_clause_from_dict_payload(self):
        params = SearchParameters.model_validate({"q": "*", "vector_query": "vec:([], id: abcd)"})
        assert params.vector_query.id == "abcd"

    def test_invalid_clause_raises_vector_query_error(self):
        with pytest.raises(MalformedVectorQueryError):
            SearchParameters(q="*", vector_query="vec:0.1")

    def test_conflicting_clause_raises(self):
        with pytest.raises(ConflictingVectorQueryError):
            SearchParameters(q="*", vector_query="vec:([0.1], id: abcd)")

    def test_serializes_as_clause_text(self):
        params = SearchParameters(q="*", vector_query=VectorQuery([0.5], "vec", k=3))
        dumped = params.model_dump(exclude_none=True)
        assert dumped["vector_query"] == "vec:([0.5],k:3)"

    def test_json_round_trip(self):
        params = SearchParameters(q="*", query_by="title", vector_query="vec:([0.5], k: 3)")
        restored = SearchParameters.model_validate_json(params.model_dump_json())
        assert restored == params


class TestQueryParams:

    def test_drops_unset_and_renders_booleans(self):
        params = SearchParameters(q="apple", query_by="title", prefix=False, per_page=10)
        assert to_query_params(params) == {
            "q": "apple",
            "query_by": "title",
            "prefix": "false",
            "per_page": "10",
        }

    def test_vector_query_rendered_in_query_string(self):
        params = SearchParameters(q="*", vector_query=VectorQuery([], "vec", id="abc"))
        assert to_query_params(params)["vector_query"] == "vec:([],id:abc)"

    def test_keyword_extras(self):
        assert to_query_params(batch_size=40, action="upsert", filter_by=None) == {
            "batch_size": "40",
            "action": "upsert",
        }


class TestMultiSearchParameters:

    def test_requires_collection(self):
        with pytest.raises(ValidationError):
            MultiSearchParameters(q="*")

    def test_includes_collection_in_dump(self):
        params = MultiSearchParameters(collection="companies", q="*", query_by="name")
        assert params.model_dump(exclude_none=True) == {
            "collection": "companies",
            "q": "*",
            "query_by": "name",
        }
