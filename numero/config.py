"""
Conversion defaults from the environment.

    NUMERO_NAMING_SYSTEM              short-scale | long-scale (and aliases)
    NUMERO_THOUSANDS_SEPARATOR        e.g. "," or "."
    NUMERO_DECIMAL_SEPARATOR          e.g. "." or ","
    NUMERO_USE_THOUSANDS_SEPARATORS   true / false
    NUMERO_FORCE_LEADING_ZERO         true / false
    NUMERO_USE_SCIENTIFIC_NOTATION    true / false

Values are handed to ConversionOptions as strings; pydantic does the
parsing and validation ("yes", "0", "off" ... all work for booleans).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from .models import ConversionOptions

ENV_PREFIX = "NUMERO_"

_ENV_FIELDS: dict[str, str] = {
    "NAMING_SYSTEM": "naming_system",
    "THOUSANDS_SEPARATOR": "thousands_separator_symbol",
    "DECIMAL_SEPARATOR": "decimal_separator_symbol",
    "USE_THOUSANDS_SEPARATORS": "use_thousands_separators",
    "FORCE_LEADING_ZERO": "force_leading_zero",
    "USE_SCIENTIFIC_NOTATION": "use_scientific_notation",
}


def load_options(env: Mapping[str, str] | None = None, **overrides: Any) -> ConversionOptions:
    """Build ConversionOptions from `env` (default: os.environ) plus overrides.

    Overrides that are None are ignored, so CLI flags that were not given
    fall through to the environment.

    Raises:
        pydantic.ValidationError: An option value is invalid.
    """
    env = os.environ if env is None else env

    values: dict[str, Any] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        raw = env.get(ENV_PREFIX + suffix)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    values.update({k: v for k, v in overrides.items() if v is not None})

    # "1.000.000" style input implies "," as the decimal separator
    if values.get("thousands_separator_symbol") == "." and "decimal_separator_symbol" not in values:
        values["decimal_separator_symbol"] = ","

    return ConversionOptions(**values)
