# src/stringcompare/utils/load_config.py

"""Build comparators from declarative specs and JSON config files.

A spec is a mapping ``{"metric": <name>, **options}``. A config file maps names
to specs::

    {
      "names":  {"metric": "jarowinkler", "similarity": true},
      "street": {"metric": "levenshtein", "normalize": true},
      "tokens": {"metric": "jaccard", "tokenizer": {"kind": "ngram", "n": 3}}
    }

The file is parsed on every call and nothing is kept at module level; comparators
are built fresh each time so scratch buffers are never shared between callers.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from stringcompare.distance.characterdifference import CharacterDifference
from stringcompare.distance.comparator import StringComparator
from stringcompare.distance.dameraulevenshtein import DamerauLevenshtein
from stringcompare.distance.hamming import Hamming
from stringcompare.distance.jaccard import Jaccard
from stringcompare.distance.jaro import Jaro
from stringcompare.distance.jarowinkler import JaroWinkler
from stringcompare.distance.lcs import LCSDistance
from stringcompare.distance.levenshtein import Levenshtein
from stringcompare.errors import ConfigError
from stringcompare.preprocessing.tokenizer import Tokenizer, TokenizerKind

# --- optional json5 support (no hard dependency) -----------------------------
try:  # mypy: json5 may be missing in most envs
    import json5 as _json5
except Exception:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "METRICS",
    "available_metrics",
    "build_tokenizer",
    "build_comparator",
    "load_config",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

__docformat__ = "google"


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(ConfigError, FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ConfigError):
    """Raise when JSON parsing fails for a config file."""


class ConfigTypeError(ConfigError, TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Registry ─────────────────────────────────────────────────────────────────
METRICS: Mapping[str, Callable[..., StringComparator]] = MappingProxyType({
    "levenshtein": Levenshtein,
    "dameraulevenshtein": DamerauLevenshtein,
    "lcs": LCSDistance,
    "hamming": Hamming,
    "jaro": Jaro,
    "jarowinkler": JaroWinkler,
    "jaccard": Jaccard,
    "characterdifference": CharacterDifference,
})


def available_metrics() -> list[str]:
    """Sorted names accepted by `build_comparator`."""
    return sorted(METRICS)


# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


# ── Builders ─────────────────────────────────────────────────────────────────
def build_tokenizer(spec: Mapping[str, Any] | str | None) -> Tokenizer:
    """Build a Tokenizer from ``{"kind": ..., "delim": ..., "n": ...}`` or a bare kind name."""
    if spec is None:
        return Tokenizer.whitespace()
    if isinstance(spec, str):
        spec = {"kind": spec}
    if not isinstance(spec, Mapping):
        raise ConfigTypeError(f"tokenizer spec must be a mapping, got {type(spec).__name__}")

    try:
        kind = TokenizerKind(str(spec.get("kind", "whitespace")).lower())
    except ValueError as e:
        raise ConfigError(f"Unknown tokenizer kind {spec.get('kind')!r}") from e

    if kind is TokenizerKind.DELIM:
        return Tokenizer.delimited(spec.get("delim", ""))
    if kind is TokenizerKind.WHITESPACE:
        return Tokenizer.whitespace()
    if kind is TokenizerKind.NGRAM:
        n = spec.get("n")
        if isinstance(n, bool) or not isinstance(n, int):
            raise ConfigTypeError(f"ngram tokenizer needs an integer 'n', got {n!r}")
        return Tokenizer.ngram(n)
    return Tokenizer()


def build_comparator(spec: Mapping[str, Any]) -> StringComparator:
    """
    Does: Instantiate the comparator named by ``spec["metric"]`` with the remaining
          keys as keyword options.
    Raises: ConfigError for unknown metrics or options, ConfigTypeError for bad shapes.
    """
    if not isinstance(spec, Mapping):
        raise ConfigTypeError(f"comparator spec must be a mapping, got {type(spec).__name__}")
    options = dict(spec)
    name = str(options.pop("metric", "")).lower().replace("-", "").replace("_", "")
    factory = METRICS.get(name)
    if factory is None:
        raise ConfigError(
            f"Unknown metric {spec.get('metric')!r}; expected one of {available_metrics()}"
        )
    if name == "jaccard":
        options["tokenizer"] = build_tokenizer(options.get("tokenizer"))

    try:
        comparator = factory(**options)
    except TypeError as e:
        raise ConfigError(f"Invalid options for {name}: {e}") from e
    log.debug("Built comparator %r", comparator)
    return comparator


# ── File loading ─────────────────────────────────────────────────────────────
def _read_specs(path: Path, allow_comments: bool) -> dict[str, dict[str, Any]]:
    try:
        with path.open("r", encoding="utf-8", errors="strict", newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                data = _json5.load(f)  # allows comments/trailing commas
            else:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except ValueError as e:
        if isinstance(e, ConfigError):
            raise
        raise ConfigParseError(f"Invalid JSON5 in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: expected an object of comparator specs, got {type(data).__name__}"
        )
    bad = [k for k, v in data.items() if not isinstance(v, dict)]
    if bad:
        raise ConfigTypeError(f"{path.name}: specs must be objects (bad keys: {bad[:3]})")
    return data


def load_config(
    file: str | os.PathLike[str],
    *,
    allow_comments: bool = False,
) -> dict[str, StringComparator]:
    """Load a JSON file of named comparator specs and build fresh comparators."""
    path = Path(os.fspath(file)).expanduser().resolve()
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    specs = _read_specs(path, allow_comments)
    log.debug("Config loaded: %s (%d entries)", path.name, len(specs))

    result: dict[str, StringComparator] = {}
    for name, spec in specs.items():
        try:
            result[name] = build_comparator(spec)
        except ConfigError as e:
            raise type(e)(f"{path.name}: entry {name!r}: {e}") from e
    return result
