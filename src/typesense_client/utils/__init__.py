"""Utility helpers for the Typesense client."""

from .query_params import to_query_params
from .scoped_key import generate_scoped_search_key

__all__ = ["generate_scoped_search_key", "to_query_params"]
