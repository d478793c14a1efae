"""CLI package for ElasticBuilder command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from ElasticBuilder.cli.runner import CommandRunner
from ElasticBuilder.cli.ui import cli


def main() -> None:
    """Run ElasticBuilder CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
