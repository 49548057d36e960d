# src/stringcompare/errors.py
"""
errors.

Does: Exception hierarchy shared by comparators, tokenizers and the config loader.
Returns: StringCompareError root plus InputError, ConfigError, ConcurrentUseError.
Used by: Batch comparison, tokenizer construction, buffered edit-distance metrics.
"""

from __future__ import annotations

__all__ = [
    "StringCompareError",
    "InputError",
    "ConfigError",
    "ConcurrentUseError",
]

__docformat__ = "google"


class StringCompareError(Exception):
    """Base class for every error raised by stringcompare."""


class InputError(StringCompareError, ValueError):
    """Raise when call arguments violate a precondition (e.g. unequal list lengths)."""


class ConfigError(StringCompareError, ValueError):
    """Raise when a comparator or tokenizer is configured with invalid options."""


class ConcurrentUseError(StringCompareError, RuntimeError):
    """Raise when a buffered comparator is entered while another call holds its buffer."""
