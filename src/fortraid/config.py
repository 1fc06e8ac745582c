"""Configuration management for FortRaid."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from fortraid.exceptions import ConfigError

FORTRAID_DIR = ".fortraid"
CONFIG_FILE = "config.json"


class StrategyConfig(BaseModel):
    """Attack strategy configuration."""

    default: str = "dp"
    brute_force_limit: int = Field(default=9, ge=0)
    random_seed: int | None = None


class GeneratorConfig(BaseModel):
    """Random forest generator configuration."""

    max_value: int = Field(default=10, ge=1)
    edge_probability: float = Field(default=0.99, ge=0.0, le=1.0)
    self_alert_probability: float = Field(default=0.2, ge=0.0, le=1.0)
    shield_probability: float = Field(default=0.2, ge=0.0, le=1.0)
    immune_probability: float = Field(default=0.2, ge=0.0, le=1.0)


class ProjectConfig(BaseModel):
    """Full project configuration."""

    name: str = ""
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    strategy: StrategyConfig = Field(default_factory=StrategyConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def find_project_root(start: Path | None = None) -> Path | None:
    """Walk up from `start` looking for a .fortraid directory."""
    current = (start or Path.cwd()).resolve()
    while current != current.parent:
        if (current / FORTRAID_DIR).is_dir():
            return current
        current = current.parent
    if (current / FORTRAID_DIR).is_dir():
        return current
    return None


def load_config(root: Path) -> ProjectConfig:
    """Load configuration from .fortraid/config.json.

    Raises ConfigError when the file exists but is not a valid configuration.
    """
    config_path = root / FORTRAID_DIR / CONFIG_FILE
    if not config_path.exists():
        return ProjectConfig(name=root.name)
    try:
        return ProjectConfig.model_validate(json.loads(config_path.read_text()))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def save_config(root: Path, config: ProjectConfig) -> None:
    """Save configuration to .fortraid/config.json."""
    config_dir = root / FORTRAID_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / CONFIG_FILE).write_text(json.dumps(config.model_dump(), indent=2))


def set_config_value(config: ProjectConfig, key: str, value: Any) -> ProjectConfig:
    """Set a nested config value using dot notation (e.g., 'strategy.default')."""
    parts = key.split(".")
    data = config.model_dump()
    target = data
    for part in parts[:-1]:
        if part not in target or not isinstance(target[part], dict):
            raise KeyError(f"Invalid config key: {key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Invalid config key: {key}")
    target[parts[-1]] = value
    return ProjectConfig(**data)
