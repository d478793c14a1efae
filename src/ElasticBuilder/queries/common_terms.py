"""Builder for the ``common`` terms query.

The ``common`` terms query splits query terms into low and high frequency
groups by their document frequency. Low frequency terms drive matching;
high frequency terms (often stopwords) only contribute to scoring of
documents that already match. See the Elasticsearch reference:
https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-common-terms-query.html

Example:
    >>> q = (
    ...     CommonTermsQuery("body", "this is bonsai cool")
    ...     .cutoff_frequency(0.001)
    ...     .low_freq_operator("AND")
    ...     .low_freq(2)
    ... )
    >>> q.to_dict()["common"]["body"]["low_freq_operator"]
    'and'
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ElasticBuilder.core.base import MonoFieldQuery
from ElasticBuilder.core.errors import InvalidOperatorValue
from ElasticBuilder.utils.log import get_logger

ES_REF_URL = (
    "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-common-terms-query.html"
)

_OPERATORS = frozenset({"and", "or"})


class CommonTermsQuery:
    """Fluent builder for a ``common`` terms clause.

    Every setter writes into the option bag of an embedded `MonoFieldQuery`
    and returns ``self`` so calls can be chained.

    Args:
        field: Document field to query against.
        query_string: Query text.
        logger: Sink for diagnostics. Defaults to the ``CommonTermsQuery``
            child of the package logger.
    """

    QUERY_TYPE = "common"

    def __init__(
        self,
        field: str | None = None,
        query_string: str | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._query = MonoFieldQuery(self.QUERY_TYPE, field, query_string)
        self._logger = logger or get_logger(type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self._query.field_name!r}, opts={dict(self._query.opts)!r})"

    @property
    def opts(self) -> Mapping[str, Any]:
        """Read-only view of the accumulated options."""
        return self._query.opts

    @property
    def field_name(self) -> str | None:
        return self._query.field_name

    @property
    def query_string(self) -> str | None:
        return self._query.query_string

    # Shared mono-field options

    def field(self, field: str) -> CommonTermsQuery:
        self._query.field(field)
        return self

    def query(self, query_string: str) -> CommonTermsQuery:
        self._query.query(query_string)
        return self

    def analyzer(self, analyzer: str) -> CommonTermsQuery:
        self._query.analyzer(analyzer)
        return self

    def minimum_should_match(self, value: str | int) -> CommonTermsQuery:
        """Set a single threshold applied to low frequency terms only.

        Mixing this with `low_freq`/`high_freq` is not supported; the later
        per-group call replaces the scalar.
        """
        self._query.minimum_should_match(value)
        return self

    def boost(self, factor: float) -> CommonTermsQuery:
        self._query.boost(factor)
        return self

    def name(self, name: str) -> CommonTermsQuery:
        self._query.name(name)
        return self

    # Common terms options

    def cutoff_frequency(self, frequency: float) -> CommonTermsQuery:
        """Set the document frequency separating low and high frequency terms.

        Args:
            frequency: Relative to the number of documents when in ``[0, 1)``,
                absolute when ``>= 1.0``. Stored as given.
        """
        self._query.set_opt("cutoff_frequency", frequency)
        return self

    def low_freq_operator(self, operator: str) -> CommonTermsQuery:
        """Boolean operator for low frequency terms, ``and`` or ``or``.

        Raises:
            InvalidOperatorValue: If ``operator`` is not ``and``/``or`` in any case.
        """
        self._query.set_opt("low_freq_operator", self._check_operator("low_freq_operator", operator))
        return self

    def high_freq_operator(self, operator: str) -> CommonTermsQuery:
        """Boolean operator for high frequency terms, ``and`` or ``or``.

        Raises:
            InvalidOperatorValue: If ``operator`` is not ``and``/``or`` in any case.
        """
        self._query.set_opt("high_freq_operator", self._check_operator("high_freq_operator", operator))
        return self

    def low_freq(self, value: str | int) -> CommonTermsQuery:
        """Minimum should match for low frequency terms, e.g. ``2`` or ``"30%"``."""
        self._min_match_mapping()["low_freq"] = value
        return self

    def high_freq(self, value: str | int) -> CommonTermsQuery:
        """Minimum should match for high frequency terms, e.g. ``2`` or ``"30%"``."""
        self._min_match_mapping()["high_freq"] = value
        return self

    def disable_coord(self, enable: bool) -> CommonTermsQuery:
        self._query.set_opt("disable_coord", enable)
        return self

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        """Return the clause as ``{"common": {field: {...}}}``.

        Raises:
            MissingQueryParam: If field or query string is not set.
        """
        return self._query.to_dict()

    def to_json(self, indent: int | None = None) -> str:
        return self._query.to_json(indent=indent)

    def _check_operator(self, param: str, operator: str) -> str:
        normalized = operator.lower() if isinstance(operator, str) else None
        if normalized not in _OPERATORS:
            self._logger.info("See %s", ES_REF_URL)
            self._logger.warning("Got '%s' - %s", param, operator)
            raise InvalidOperatorValue(param, operator)
        return normalized

    def _warn(self, msg: str) -> None:
        self._logger.warning("[%s] %s", type(self).__name__, msg)

    def _min_match_mapping(self) -> dict[str, Any]:
        if "minimum_should_match" in self._query.opts:
            current = self._query.get_opt("minimum_should_match")
            if isinstance(current, dict):
                return current
            # A scalar was set through minimum_should_match().
            self._warn("Do not mix with other representation!")
            self._warn("Overwriting.")
        fresh: dict[str, Any] = {}
        self._query.set_opt("minimum_should_match", fresh)
        return fresh
