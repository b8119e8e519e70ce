"""Configuration management system using Pydantic v2 and YAML.

This module provides type-safe configuration loading with validation
for the StyleMatch catalog engine.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError, ConfigValidationError

DEFAULT_FIT_VOCABULARY = ["oversized", "relaxed", "fitted", "loose"]


class CatalogConfig(BaseModel):
    """Location of the static product catalog."""

    products_path: str = Field(default="./data/products.json", description="Path to the products JSON file")


class PreferencesConfig(BaseModel):
    """Configuration for saved items and recent searches persistence."""

    storage_path: str = Field(default="./data/preferences.json", description="Key-value JSON file for user preferences")
    recent_searches_limit: int = Field(default=8, ge=1, description="Maximum number of recent searches kept")


class SearchConfig(BaseModel):
    """Configuration for catalog search and derived accessors."""

    fit_vocabulary: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FIT_VOCABULARY),
        description="Tags treated as fit values",
    )
    related_limit: int = Field(default=10, ge=1, description="Number of related products shown for an item")

    @field_validator('fit_vocabulary')
    @classmethod
    def validate_fit_vocabulary(cls, v: list[str]) -> list[str]:
        """Ensure the fit vocabulary is non-empty and lower-cased."""
        cleaned = [fit.strip().lower() for fit in v if fit.strip()]
        if not cleaned:
            raise ValueError("fit_vocabulary must contain at least one fit")
        return cleaned


class AppConfig(BaseModel):
    """Root configuration model containing all sub-configurations."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    preferences: PreferencesConfig = Field(default_factory=PreferencesConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Choose from: {valid_levels}")
        return v_upper

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> "AppConfig":
        """Load and validate a configuration file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigError: If the YAML cannot be parsed
            ConfigValidationError: If values fail validation
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in {config_path}", context={"path": str(config_path)}
            ) from e

        if not isinstance(config_dict, dict):
            raise ConfigValidationError(
                "Configuration root must be a mapping", value=type(config_dict).__name__
            )

        try:
            return cls.model_validate(config_dict)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ConfigValidationError(first["msg"], field=field) from e


# Singleton pattern for configuration
_config: Optional[AppConfig] = None


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to configuration file. Defaults to the
                    STYLEMATCH_CONFIG env var, then config/config.yaml
                    relative to the project root

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If configuration is invalid
    """
    if config_path is None:
        env_config_path = os.environ.get('STYLEMATCH_CONFIG')
        if env_config_path:
            config_path = Path(env_config_path)
        else:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "config.yaml"

    return AppConfig.from_yaml(config_path)


def get_config(config_path: Optional[Path | str] = None, reload: bool = False) -> AppConfig:
    """Get configuration instance (singleton pattern).

    Args:
        config_path: Path to configuration file (only used on first call or if reload=True)
        reload: Force reload of configuration

    Returns:
        Cached or newly loaded AppConfig instance
    """
    global _config

    if _config is None or reload:
        _config = load_config(config_path)

    return _config


def reset_config() -> None:
    """Reset cached configuration (useful for testing)."""
    global _config
    _config = None
