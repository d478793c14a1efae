"""Query domain configuration: ``common`` terms clauses declared in YAML.

Example:

    queries:
      - NAME: stopword-aware
        field: body
        query: "nelly the elephant as a cartoon"
        cutoff_frequency: 0.001
        low_freq_operator: and
        minimum_should_match:
          low_freq: 2
          high_freq: "3<80%"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ElasticBuilder.config.common import (
    expect_bool,
    expect_number,
    expect_str,
    expect_str_or_int,
    get_required_value,
)
from ElasticBuilder.queries.common_terms import CommonTermsQuery

_ALLOWED_KEYS = {
    "NAME",
    "field",
    "query",
    "cutoff_frequency",
    "low_freq_operator",
    "high_freq_operator",
    "minimum_should_match",
    "disable_coord",
    "analyzer",
    "boost",
}
_ALLOWED_MIN_MATCH_KEYS = {"low_freq", "high_freq"}
_ALLOWED_OPERATORS = {"and", "or"}


@dataclass(frozen=True, slots=True)
class CommonTermsSpec:
    """Validated settings for one ``common`` terms clause.

    ``minimum_should_match`` is either a scalar or a mapping with
    ``low_freq``/``high_freq`` keys; ``None`` fields are left unset.
    """

    name: str | None
    field: str
    query: str
    cutoff_frequency: float | None = None
    low_freq_operator: str | None = None
    high_freq_operator: str | None = None
    minimum_should_match: str | int | Mapping[str, str | int] | None = None
    disable_coord: bool | None = None
    analyzer: str | None = None
    boost: float | None = None


def load_queries(raw: Mapping[str, Any]) -> tuple[CommonTermsSpec, ...]:
    """Load the ``queries`` list from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or unknown keys exist.
    """
    queries_obj = raw.get("queries")
    if queries_obj is None:
        raise ValueError("Missing required config: queries")
    if not isinstance(queries_obj, list):
        raise TypeError("queries must be a list")
    return tuple(parse_common_terms(item, f"queries[{idx}]") for idx, item in enumerate(queries_obj))


def check_queries(queries: tuple[CommonTermsSpec, ...]) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If values violate query constraints.
    """
    if not queries:
        raise ValueError("queries must include at least one query")
    for idx, spec in enumerate(queries):
        key = f"queries[{idx}]"
        if not spec.field.strip():
            raise ValueError(f"{key}.field must not be empty")
        if spec.cutoff_frequency is not None and spec.cutoff_frequency < 0:
            raise ValueError(f"{key}.cutoff_frequency must be >= 0")
        for op_key in ("low_freq_operator", "high_freq_operator"):
            op = getattr(spec, op_key)
            if op is not None and op.lower() not in _ALLOWED_OPERATORS:
                raise ValueError(f"{key}.{op_key} must be one of {sorted(_ALLOWED_OPERATORS)}")


def parse_common_terms(value: Any, config_key: str) -> CommonTermsSpec:
    """Parse a clause mapping into ``CommonTermsSpec``.

    Args:
        value: Clause mapping value.
        config_key: Full key path used in error messages.

    Raises:
        TypeError: If clause shape/types are invalid.
        ValueError: If required keys are missing or unknown keys exist.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")

    unknown = {str(k) for k in value.keys()} - _ALLOWED_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    name = None
    if "NAME" in value:
        name = expect_str(value["NAME"], f"{config_key}.NAME").strip() or None

    def optional(key: str, expect: Any) -> Any:
        if value.get(key) is None:
            return None
        return expect(value[key], f"{config_key}.{key}")

    return CommonTermsSpec(
        name=name,
        field=expect_str(get_required_value(value, "field", f"{config_key}.field"), f"{config_key}.field"),
        query=expect_str(get_required_value(value, "query", f"{config_key}.query"), f"{config_key}.query"),
        cutoff_frequency=optional("cutoff_frequency", expect_number),
        low_freq_operator=optional("low_freq_operator", expect_str),
        high_freq_operator=optional("high_freq_operator", expect_str),
        minimum_should_match=_parse_min_match(value.get("minimum_should_match"), f"{config_key}.minimum_should_match"),
        disable_coord=optional("disable_coord", expect_bool),
        analyzer=optional("analyzer", expect_str),
        boost=optional("boost", expect_number),
    )


def _parse_min_match(value: Any, config_key: str) -> str | int | dict[str, str | int] | None:
    """Parse either the scalar or the per-frequency-group form."""
    if value is None:
        return None
    if not isinstance(value, Mapping):
        return expect_str_or_int(value, config_key)

    unknown = {str(k) for k in value.keys()} - _ALLOWED_MIN_MATCH_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")
    out: dict[str, str | int] = {}
    for key in ("low_freq", "high_freq"):
        if value.get(key) is not None:
            out[key] = expect_str_or_int(value[key], f"{config_key}.{key}")
    if not out:
        raise ValueError(f"{config_key} must set low_freq or high_freq")
    return out


def build_query(spec: CommonTermsSpec) -> CommonTermsQuery:
    """Create a ``CommonTermsQuery`` carrying every option set in ``spec``.

    Raises:
        InvalidOperatorValue: If an operator is not ``and``/``or``.
    """
    query = CommonTermsQuery(spec.field, spec.query)
    if spec.cutoff_frequency is not None:
        query.cutoff_frequency(spec.cutoff_frequency)
    if spec.low_freq_operator is not None:
        query.low_freq_operator(spec.low_freq_operator)
    if spec.high_freq_operator is not None:
        query.high_freq_operator(spec.high_freq_operator)

    min_match = spec.minimum_should_match
    if isinstance(min_match, Mapping):
        if "low_freq" in min_match:
            query.low_freq(min_match["low_freq"])
        if "high_freq" in min_match:
            query.high_freq(min_match["high_freq"])
    elif min_match is not None:
        query.minimum_should_match(min_match)

    if spec.disable_coord is not None:
        query.disable_coord(spec.disable_coord)
    if spec.analyzer is not None:
        query.analyzer(spec.analyzer)
    if spec.boost is not None:
        query.boost(spec.boost)
    if spec.name is not None:
        query.name(spec.name)
    return query
