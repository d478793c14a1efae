"""Console output renderer.

Prints each built clause through the package logger.
"""

from __future__ import annotations

from typing import Any

from ElasticBuilder.renderers.base import OutputWriter
from ElasticBuilder.renderers.json import render_json
from ElasticBuilder.utils.log import log


class ConsoleOutputWriter(OutputWriter):
    """Log each clause as soon as it is written."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent
        self.count = 0

    def write_query(self, name: str | None, payload: dict[str, Any]) -> None:
        self.count += 1
        header = f"=== {name} ===" if name else f"=== Query {self.count} ==="
        log.info("%s\n%s", header, render_json(payload, indent=self.indent))

    def finalize(self, action: str) -> None:
        log.info("%s: %d quer%s rendered", action, self.count, "y" if self.count == 1 else "ies")
