"""JSON output renderers.

Renders built clauses as JSON text and provides the JsonFileWriter that
collects every clause of a run into one file.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from ElasticBuilder.renderers.base import OutputWriter
from ElasticBuilder.utils.log import log


def render_json(payload: dict[str, Any], indent: int | None = 2) -> str:
    """Render a query DSL dict as JSON text.

    Args:
        payload: Serialized clause.
        indent: Indentation width, ``None`` for a single line.
    """
    return json.dumps(payload, ensure_ascii=False, indent=indent)


class JsonFileWriter(OutputWriter):
    """Accumulate clauses and write them to a JSON file on finalize."""

    def __init__(self, base_dir: str, indent: int | None = 2) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
            indent: Indentation width for the written file.
        """
        self.output_dir = Path(base_dir) / "json"
        self.indent = indent
        self.all_results: list[dict[str, Any]] = []

    def write_query(self, name: str | None, payload: dict[str, Any]) -> None:
        self.all_results.append({"name": name, "query": payload})

    def finalize(self, action: str) -> None:
        """Write accumulated clauses to ``<base_dir>/json/<action>_<timestamp>.json``."""
        text = json.dumps(self.all_results, ensure_ascii=False, indent=self.indent)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(text, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
