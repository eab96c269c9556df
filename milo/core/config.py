"""Configuration management for Milo."""

from __future__ import annotations

import json
from argparse import ArgumentParser, Namespace
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from milo.utils import Constants, default_history_path, expand_file_path


class Config(BaseModel):
    """Configuration for the history engine and its command-line front end."""

    history_file: Path = Field(
        default_factory=default_history_path, description="Transformation history JSON file"
    )
    max_entries: int = Field(
        Constants.DEFAULT_MAX_ENTRIES, ge=1, description="Entries kept before the oldest drop"
    )
    history_limit: int = Field(
        Constants.DEFAULT_HISTORY_LIMIT, ge=1, description="Default number of entries listed"
    )
    stats_days: int = Field(
        Constants.DEFAULT_STATS_DAYS, ge=1, description="Default window for daily statistics"
    )
    log_file: Path | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("history_file", "log_file", mode="before")
    @classmethod
    def expand_user(cls, v):
        """Expand ``~`` in configured paths."""
        if isinstance(v, str):
            return expand_file_path(v) or v
        return v


def load_config(json_path: str | None, cli_args: Namespace, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key, None)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value is not None and cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise

    config_dict = {
        "max_entries": get_value("max_entries", Constants.DEFAULT_MAX_ENTRIES),
        "history_limit": get_value("history_limit", Constants.DEFAULT_HISTORY_LIMIT),
        "stats_days": get_value("stats_days", Constants.DEFAULT_STATS_DAYS),
        "log_file": get_value("log_file", None),
        "verbose": bool(getattr(cli_args, "verbose", False)) or json_config.get("verbose", False),
        "debug": bool(getattr(cli_args, "debug", False)) or json_config.get("debug", False),
    }
    history_file = get_value("history_file", None)
    if history_file:
        config_dict["history_file"] = history_file

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
