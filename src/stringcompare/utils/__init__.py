# src/stringcompare/utils/__init__.py
"""

Does: Provide declarative comparator construction and JSON config loading.
Returns: Public API via build_comparator/build_tokenizer/load_config.
Used by: Binding and CLI layers, batch jobs configuring metrics from files, tests.
"""

from __future__ import annotations

from .load_config import (
    METRICS,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    available_metrics,
    build_comparator,
    build_tokenizer,
    load_config,
)

__all__ = [
    # Builders
    "METRICS",
    "available_metrics",
    "build_comparator",
    "build_tokenizer",
    # Config loading
    "load_config",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

__docformat__ = "google"
