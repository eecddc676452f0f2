"""
Environment helpers for config sections.
"""

from __future__ import annotations

import os
from dataclasses import MISSING, Field
from logging import getLogger
from typing import Any, Dict, Mapping, Optional

logger = getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def read_env_defaults(
    env_map: Mapping[str, str],
    fields: Mapping[str, Field],
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Collect dataclass keyword arguments from environment variables.

    Only variables that are set are returned; the rest fall back to the
    dataclass defaults. Values are coerced to the type of the field's
    default. A value that cannot be coerced is logged and ignored.
    """
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}
    for field_name, env_name in env_map.items():
        raw = env.get(env_name)
        if raw is None or field_name not in fields:
            continue
        default = fields[field_name].default
        try:
            values[field_name] = _coerce(raw, default)
        except ValueError:
            logger.warning(f"Ignoring invalid value for {env_name}: {raw!r}")
    return values


def _coerce(raw: str, default: Any) -> Any:
    if default is MISSING or default is None or isinstance(default, str):
        return raw
    # bool before int: bool is an int subclass
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(raw)
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    return raw
