"""Global configuration and constants for the device sizing engine."""

from __future__ import annotations

import json
import logging
import os
from typing import Dict, Final, Mapping, Optional, Union

_log = logging.getLogger(__name__)

# Largest concrete width the last bucket can hold; acts as "unbounded"
SENTINEL_MAX: Final = 9999
MEDIA_QUERY_TEMPLATE: Final = "@media (max-width: {max}px)"
LOG_LEVEL: Final = os.environ.get("DEVICE_SIZES_LOG_LEVEL", "WARNING")

# JSON object of breakpoint overrides used by the CLI when no flags are given
BREAKPOINTS_ENV_VAR: Final = "DEVICE_SIZES_BREAKPOINTS"


class BreakpointConfigError(ValueError):
    """Raised when breakpoint overrides cannot be read as integer widths."""


def parse_log_level(value: str) -> Optional[int]:
    """Map a level name ("info") or number ("20") to a logging level, else None."""
    name = value.strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def load_env_breakpoints(
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Union[int, str]]:
    """Return the override mapping stored in ``DEVICE_SIZES_BREAKPOINTS``.

    Missing or blank variable yields an empty mapping. Values are returned as
    found; integer coercion happens in ``Breakpoints.from_mapping``.
    """
    env = os.environ if environ is None else environ
    raw = env.get(BREAKPOINTS_ENV_VAR, "").strip()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise BreakpointConfigError(f"{BREAKPOINTS_ENV_VAR} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise BreakpointConfigError(f"{BREAKPOINTS_ENV_VAR} must hold a JSON object")
    _log.debug("Loaded breakpoint overrides from environment: %s", data)
    return data
