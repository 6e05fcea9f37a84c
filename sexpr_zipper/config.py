"""
Configuration for whitespace-aware navigation and insertion.

Provides the configuration schema, validation, and loading from JSON files.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
from pathlib import Path
from typing import FrozenSet, Optional

from pydantic import BaseModel, Field, field_validator

from .errors import ConfigurationError
from .nodes import NodeKind


class ZipperConfig(BaseModel):
    """Whitespace policy shared by navigation, search and insertion."""

    model_config = {"extra": "forbid", "frozen": True}  # Reject unknown fields

    separator: str = Field(
        default=" ",
        description="Text of the whitespace node synthesized between inserted items",
    )
    skip_comments: bool = Field(
        default=True,
        description="Treat comments as insignificant during navigation and search",
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separator must be non-empty whitespace."""
        if not v or not v.isspace():
            raise ValueError(f"Separator must be non-empty whitespace, got: {v!r}")
        return v

    @property
    def insignificant_kinds(self) -> FrozenSet[NodeKind]:
        """Node kinds skipped by navigation."""
        if self.skip_comments:
            return frozenset({NodeKind.WHITESPACE, NodeKind.COMMENT})
        return frozenset({NodeKind.WHITESPACE})


DEFAULT_CONFIG = ZipperConfig()


def validate_config(
    config_path: Path,
) -> tuple[bool, Optional[str], Optional[ZipperConfig]]:
    """
    Validate configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        Tuple of (is_valid, error_message, config_object)
    """
    try:
        if not config_path.exists():
            return False, f"Configuration file not found: {config_path}", None

        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)

        if not isinstance(config_data, dict):
            return False, "Configuration must be a JSON object", None

        # Validate using Pydantic
        config = ZipperConfig(**config_data)
        return True, None, config

    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {str(e)}", None
    except ValueError as e:
        return False, f"Validation error: {str(e)}", None
    except OSError as e:
        return False, f"Cannot read configuration: {str(e)}", None


def load_config(config_path: Path) -> ZipperConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Path to configuration file

    Returns:
        ZipperConfig object

    Raises:
        ConfigurationError: If configuration is invalid
    """
    is_valid, error, config = validate_config(Path(config_path))
    if not is_valid or config is None:
        raise ConfigurationError(
            error or "Invalid configuration",
            details={"path": str(config_path)},
        )
    return config
