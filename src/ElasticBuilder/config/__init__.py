"""Public configuration API for ElasticBuilder."""

from __future__ import annotations

from ElasticBuilder.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
    parse_yaml,
)
from ElasticBuilder.config.output import OutputConfig
from ElasticBuilder.config.query import CommonTermsSpec, build_query
from ElasticBuilder.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "OutputConfig",
    "CommonTermsSpec",
    "AppConfig",
    "build_query",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_yaml",
]
