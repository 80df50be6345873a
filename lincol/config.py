"""Runtime configuration for lincol.

Config priority (highest to lowest):
1. Keyword arguments to load_config()
2. Environment variables (LINCOL_* prefixed)
3. Built-in defaults
"""

import os
from dataclasses import dataclass
from enum import Enum

from .parsers import Format
from .utils.logging import logger


class DuplicateKeyPolicy(str, Enum):
    """Which occurrence of a repeated mapping key the Index addresses."""

    LAST = "last"
    FIRST = "first"
    ERROR = "error"


DEFAULTS = {
    "format": "auto",
    "duplicate_keys": "last",
}

_TYPES = {
    "format": Format,
    "duplicate_keys": DuplicateKeyPolicy,
}


@dataclass(frozen=True)
class IndexConfig:
    format: Format = Format.AUTO
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST


def _coerce(enum_type, value):
    if isinstance(value, enum_type):
        return value
    return enum_type(str(value).strip().lower())


def load_config(**overrides) -> IndexConfig:
    """Build an IndexConfig from defaults, LINCOL_* variables and overrides.

    Args:
        **overrides: format and/or duplicate_keys; None means "not given"

    Raises:
        TypeError: For an unknown option name.
        ValueError: For an invalid override value. Invalid environment values
            are logged and ignored instead.
    """
    values = dict(DEFAULTS)

    for key in values:
        env_var = f"LINCOL_{key.upper()}"
        if env_var not in os.environ:
            continue
        raw = os.environ[env_var]
        try:
            values[key] = _coerce(_TYPES[key], raw)
        except ValueError:
            logger.warning(
                "Invalid value for environment variable {var}: {raw!r}, using {default!r}",
                var=env_var,
                raw=raw,
                default=values[key],
            )

    for key, value in overrides.items():
        if key not in DEFAULTS:
            raise TypeError(f"unknown config option {key!r}")
        if value is not None:
            values[key] = value

    return IndexConfig(
        format=_coerce(Format, values["format"]),
        duplicate_keys=_coerce(DuplicateKeyPolicy, values["duplicate_keys"]),
    )
