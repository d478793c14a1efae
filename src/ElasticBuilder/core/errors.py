"""Exceptions raised by query builders."""

from __future__ import annotations


class QueryError(ValueError):
    """Base class for query construction errors."""


class InvalidOperatorValue(QueryError):
    """An operator setter received a value other than ``and``/``or``.

    Attributes:
        param: Option key the value was meant for (e.g. ``low_freq_operator``).
        value: The rejected raw input.
    """

    def __init__(self, param: str, value: object) -> None:
        super().__init__("The operator parameter can only be `and` or `or`")
        self.param = param
        self.value = value


class MissingQueryParam(QueryError):
    """A mandatory parameter was not set before serialization."""

    def __init__(self, param: str) -> None:
        super().__init__(f"`{param}` is mandatory and must be set before serializing the query")
        self.param = param
