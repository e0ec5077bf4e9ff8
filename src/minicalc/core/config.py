"""
Configuration for the minicalc command line.

Configuration is loaded from the [minicalc] section of minicalc.toml.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from minicalc.core.expression_lang.lexer import INT_MAX

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "minicalc.toml"


class CalcConfig(BaseModel):
    """Settings for the REPL and one-shot commands."""

    prompt: str = ">"
    show_tree: bool = True
    max_int: int = Field(default=INT_MAX, ge=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_config(toml_path: Path) -> CalcConfig:
    """
    Load configuration from minicalc.toml.

    Args:
        toml_path: Path to the TOML file

    Returns:
        CalcConfig with values from file or defaults
    """
    if not toml_path.exists():
        return CalcConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Ignoring unreadable config {toml_path}: {e}")
        return CalcConfig()

    section: dict[str, Any] = data.get("minicalc", {})
    if not section:
        return CalcConfig()

    return CalcConfig.model_validate(section)
