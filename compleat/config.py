# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Compleat.

Settings are read from the first existing file of `CONFIG_CANDIDATES` (TOML or
YAML, chosen by extension) and validated with pydantic.

Example `compleat.toml`:

    long_shorthand = false
    max_callback_depth = 50
    log_mode = "json"
    log_file = "/tmp/compleat.log"
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError

from compleat.context import MAX_CALLBACK_DEPTH
from compleat.exceptions import ConfigError
from compleat.logger import logger


class CompleatConfig(BaseModel):
    """
    Settings of the completion engine.

    Attributes:
        long_shorthand (bool): Offer long flag names with a single dash.
        max_callback_depth (int): Callbacks unwrapped before resolution fails.
        log_mode (str | None): "cli" or "json"; None picks by environment.
        log_file (str | None): Optional log file.
    """

    long_shorthand: bool = False
    max_callback_depth: int = Field(default=MAX_CALLBACK_DEPTH, gt=0)
    log_mode: Literal["cli", "json"] | None = None
    log_file: str | None = None


def config_candidates() -> list[Path]:
    candidates = [
        Path.cwd() / "compleat.toml",
        Path.cwd() / "compleat.yaml",
        Path.cwd() / ".compleat.toml",
        Path.cwd() / ".compleat.yaml",
    ]
    if os.environ.get("COMPLEAT_CONFIG"):
        candidates.append(Path(os.environ["COMPLEAT_CONFIG"]))
    candidates.extend(
        [
            Path.home() / ".config" / "compleat" / "compleat.toml",
            Path.home() / ".config" / "compleat" / "compleat.yaml",
        ]
    )
    return candidates


def find_config() -> Path | None:
    return next((path for path in config_candidates() if path.is_file()), None)


def load_config(path: Path | str | None = None) -> CompleatConfig:
    """
    Load settings from `path`, or from the first candidate file found.

    Returns the defaults when no file exists.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = Path(path) if path else find_config()
    if config_path is None:
        return CompleatConfig()

    suffix = config_path.suffix.lower()
    try:
        with config_path.open("r", encoding="UTF-8") as config_file:
            if suffix == ".toml":
                raw: Any = toml.load(config_file)
            elif suffix in (".yaml", ".yml"):
                raw = yaml.safe_load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {config_path}")
    except (OSError, toml.TomlDecodeError, yaml.YAMLError) as error:
        raise ConfigError(f"Failed to read config {config_path}: {error}") from error

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping")

    try:
        config = CompleatConfig(**raw)
    except ValidationError as error:
        raise ConfigError(f"Invalid config {config_path}: {error}") from error
    logger.debug("Loaded config from '%s'", config_path)
    return config
