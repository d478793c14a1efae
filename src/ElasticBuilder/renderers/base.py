"""Base classes for output writers.

Separates where built clauses go (console, files) from how they are built.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query(self, name: str | None, payload: dict[str, Any]) -> None:
        """Write one serialized clause.

        Args:
            name: Optional clause name from config.
            payload: Query DSL dict, e.g. ``{"common": {...}}``.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'build').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query(self, name: str | None, payload: dict[str, Any]) -> None:
        for writer in self.writers:
            writer.write_query(name, payload)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
