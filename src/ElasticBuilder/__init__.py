"""ElasticBuilder: fluent builders for Elasticsearch query DSL clauses."""

from __future__ import annotations

from ElasticBuilder.core import InvalidOperatorValue, MissingQueryParam, MonoFieldQuery, QueryError
from ElasticBuilder.queries import CommonTermsQuery

__version__ = "0.1.0"

__all__ = [
    "CommonTermsQuery",
    "MonoFieldQuery",
    "QueryError",
    "InvalidOperatorValue",
    "MissingQueryParam",
]
