# src/fuzzystrings/utils/load_config.py

"""Read a JSON settings object from a <data/> directory and validate it.

The data directory is `base_dir` when given, else $FUZZYSTRINGS_DATA_DIR or
$DATA_DIR, else the first `data/` found walking up from this module (the
bundled `fuzzystrings/data`).

Used by the CLI demo to read its default query, candidates and metric.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

ENV_DATA_DIRS = ("FUZZYSTRINGS_DATA_DIR", "DATA_DIR")
Validator = Callable[[dict[str, Any]], dict[str, Any]]

__all__ = [
    "load_config",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is configured or discovered."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when a settings file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a settings file is not valid JSON or fails its validator."""


class ConfigTypeError(TypeError):
    """Raise when a settings file does not hold a JSON object."""


log = logging.getLogger(__name__)


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Pick the data directory: explicit > env override > discovery."""
    if base_dir is not None:
        return base_dir.resolve()
    for var in ENV_DATA_DIRS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()

    here = Path(__file__).resolve()
    tried = [(p / "data") for p in here.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, then pass it through `validator` if given."""
    data_dir = resolve_data_dir(base_dir)

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to access file outside data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        with path.open("r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    if validator is not None:
        try:
            data = validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    log.debug("Config loaded: %s", path)
    return data
