"""Command implementations for ElasticBuilder CLI.

Encapsulates the build logic, separated from CLI parameter handling and
output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from ElasticBuilder.config import AppConfig, build_query
from ElasticBuilder.renderers import OutputWriter
from ElasticBuilder.utils.log import log


@dataclass(slots=True)
class BuildCommand:
    """Build every configured clause and hand it to the output writer."""

    config: AppConfig
    output_writer: OutputWriter

    def execute(self) -> None:
        total = len(self.config.queries)
        for idx, spec in enumerate(self.config.queries, start=1):
            log.debug("Building query %d/%d name=%s field=%s", idx, total, spec.name, spec.field)
            query = build_query(spec)
            self.output_writer.write_query(spec.name, query.to_dict())
