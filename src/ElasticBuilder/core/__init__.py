"""Core building blocks shared by query clause builders."""

from __future__ import annotations

from ElasticBuilder.core.base import MonoFieldQuery
from ElasticBuilder.core.errors import InvalidOperatorValue, MissingQueryParam, QueryError

__all__ = ["MonoFieldQuery", "QueryError", "InvalidOperatorValue", "MissingQueryParam"]
