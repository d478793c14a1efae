"""Query clause builders."""

from __future__ import annotations

from ElasticBuilder.queries.common_terms import ES_REF_URL, CommonTermsQuery

__all__ = ["CommonTermsQuery", "ES_REF_URL"]
