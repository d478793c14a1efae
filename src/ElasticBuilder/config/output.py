"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ElasticBuilder.config.common import (
    expect_int,
    expect_str,
    expect_str_list,
    get_required_value,
    get_section,
)

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Store validated output settings.

    Attributes:
        formats: Enabled writers, in configured order.
        base_dir: Directory for file outputs.
        indent: JSON indentation, ``None`` for compact output.
    """

    formats: tuple[str, ...]
    base_dir: str
    indent: int | None


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output configuration from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "output", required=True)
    formats = expect_str_list(get_required_value(section, "formats", "output.formats"), "output.formats")

    indent_value = section.get("indent", 2)
    indent = None if indent_value is None else expect_int(indent_value, "output.indent")

    return OutputConfig(
        formats=tuple(dict.fromkeys(fmt.strip().lower() for fmt in formats)),
        base_dir=expect_str(get_required_value(section, "base_dir", "output.base_dir"), "output.base_dir"),
        indent=indent,
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown format(s): {sorted(unknown)}")
    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty when json output is enabled")
    if config.indent is not None and config.indent < 0:
        raise ValueError("output.indent must be >= 0 or null")
