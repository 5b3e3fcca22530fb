"""
Diagnostics configuration.

Controls how parse failures are rendered for humans. It has no effect on
what the grammar accepts.

Configuration is read from either a ``bloom.toml``::

    [diagnostics]
    context_lines = 1
    marker = "^^^"

or the ``[tool.bloom.diagnostics]`` table of a ``pyproject.toml``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)


class DiagnosticsConfig(BaseModel):
    """
    Settings for error diagnostics.

    Attributes:
        context_lines: Source lines shown before and after the error line
        marker: Text placed under the error column
        show_snippet: Whether to include source lines at all
        default_source: Source label used when no file is given
    """

    context_lines: int = Field(default=2, ge=0)
    marker: str = Field(default="^", min_length=1)
    show_snippet: bool = True
    default_source: str = "<input>"

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_CONFIG = DiagnosticsConfig()


def load_config(path: Path) -> DiagnosticsConfig:
    """
    Load diagnostics settings from a TOML file.

    A missing file or a file without a diagnostics table yields the defaults.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return DEFAULT_CONFIG

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    table = _find_diagnostics_table(data, path)
    if table is None:
        return DEFAULT_CONFIG

    try:
        return DiagnosticsConfig(**table)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid diagnostics settings in {path}: {e}") from e


def _find_diagnostics_table(data: dict[str, Any], path: Path) -> dict[str, Any] | None:
    keys = ["tool", "bloom", "diagnostics"] if path.name == "pyproject.toml" else ["diagnostics"]

    table: Any = data
    for depth, key in enumerate(keys):
        table = table.get(key)
        if table is None:
            return None
        if not isinstance(table, dict):
            dotted = ".".join(keys[: depth + 1])
            raise ConfigError(f"'{dotted}' in {path} must be a table")
    return table
