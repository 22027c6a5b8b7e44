# src/fuzzystrings/utils/__init__.py
"""

Does: Provide JSON settings loading for the CLI demo.
Returns: Public API via load_config/resolve_data_dir and the typed config errors.
Used by: The CLI demo and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    load_config,
    resolve_data_dir,
)

__all__ = [
    "load_config",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]
