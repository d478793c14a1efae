"""Output renderers for built clauses.

Exports the OutputWriter base for new output formats and a factory that
instantiates writers from configuration.
"""

from __future__ import annotations

from ElasticBuilder.config import AppConfig
from ElasticBuilder.renderers.base import MultiOutputWriter, OutputWriter
from ElasticBuilder.renderers.console import ConsoleOutputWriter
from ElasticBuilder.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        A MultiOutputWriter wrapping one writer per configured format.
    """
    writers: list[OutputWriter] = []
    for fmt in config.output.formats:
        if fmt == "console":
            writers.append(ConsoleOutputWriter(config.output.indent))
        elif fmt == "json":
            writers.append(JsonFileWriter(config.output.base_dir, config.output.indent))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "create_output_writer",
]
