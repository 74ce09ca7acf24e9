"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/errtypes/errtypes.yaml
4) Model defaults

Environment variable format:
- Prefix: ``ERRTYPES_``
- Nested keys: ``__`` separator
- Example: ``ERRTYPES_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import _ACTIVE_CONFIG_PATH, DEFAULT_CONFIG_PATH, ErrtypesSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ErrtypesSettings:
    """Resolve and validate settings from every configured source.

    A missing YAML file contributes nothing. Invalid values raise
    ``pydantic.ValidationError``.
    """
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    token = _ACTIVE_CONFIG_PATH.set(resolved)
    try:
        return ErrtypesSettings(**dict(cli_params or {}))
    finally:
        _ACTIVE_CONFIG_PATH.reset(token)
