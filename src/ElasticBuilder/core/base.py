"""Shared option storage for single-field full-text queries.

`MonoFieldQuery` holds what every clause of the form

    {"<type>": {"<field>": {"query": "<text>", ...options}}}

has in common: the query type tag, the target field and the option bag.
Clause builders embed one instance and write their own keys through
`set_opt`.
"""

from __future__ import annotations

import json
from copy import deepcopy
from types import MappingProxyType
from typing import Any, Mapping

from ElasticBuilder.core.errors import MissingQueryParam


class MonoFieldQuery:
    """Option bag for a full-text query against one field.

    Args:
        query_type: Clause name used as the outer key, e.g. ``common``.
        field: Document field to query against.
        query_string: Text to analyze and search for.
    """

    def __init__(self, query_type: str, field: str | None = None, query_string: str | None = None) -> None:
        self.query_type = query_type
        self._field = field
        self._opts: dict[str, Any] = {}
        if query_string is not None:
            self._opts["query"] = query_string

    @property
    def field_name(self) -> str | None:
        return self._field

    @property
    def query_string(self) -> str | None:
        return self._opts.get("query")

    @property
    def opts(self) -> Mapping[str, Any]:
        """Read-only view of the option bag."""
        return MappingProxyType(self._opts)

    def field(self, field: str) -> MonoFieldQuery:
        self._field = field
        return self

    def query(self, query_string: str) -> MonoFieldQuery:
        self._opts["query"] = query_string
        return self

    def analyzer(self, analyzer: str) -> MonoFieldQuery:
        """Analyzer used to convert the query text into terms."""
        self._opts["analyzer"] = analyzer
        return self

    def minimum_should_match(self, value: str | int) -> MonoFieldQuery:
        """Minimum number (or percentage) of optional clauses that must match."""
        self._opts["minimum_should_match"] = value
        return self

    def boost(self, factor: float) -> MonoFieldQuery:
        self._opts["boost"] = factor
        return self

    def name(self, name: str) -> MonoFieldQuery:
        """Name reported in ``matched_queries`` of each hit."""
        self._opts["_name"] = name
        return self

    def get_opt(self, key: str, default: Any = None) -> Any:
        return self._opts.get(key, default)

    def set_opt(self, key: str, value: Any) -> None:
        self._opts[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the query DSL structure.

        Returns:
            ``{query_type: {field: {...options}}}`` with nested values copied.

        Raises:
            MissingQueryParam: If field or query string is not set.
        """
        if self._field is None:
            raise MissingQueryParam("field")
        if self._opts.get("query") is None:
            raise MissingQueryParam("query")
        return {self.query_type: {self._field: deepcopy(self._opts)}}

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
