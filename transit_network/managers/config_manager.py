"""
Configuration management for the Transit Network library.

This module handles loading, saving, and validating network configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .._version import __app_name__, __version__
from ..core.models.station import OccupancyLevel

logger = logging.getLogger(__name__)


class WaitTimeConfig(BaseModel):
    """Default wait time in minutes for each occupancy level."""

    low: int = Field(default=2, ge=0, description="Wait time at LOW occupancy")
    medium: int = Field(default=5, ge=0, description="Wait time at MEDIUM occupancy")
    high: int = Field(default=10, ge=0, description="Wait time at HIGH occupancy")

    def as_mapping(self) -> Dict[OccupancyLevel, int]:
        """Get the wait times keyed by occupancy level."""
        return {
            OccupancyLevel.LOW: self.low,
            OccupancyLevel.MEDIUM: self.medium,
            OccupancyLevel.HIGH: self.high,
        }


class NetworkConfig(BaseModel):
    """Main configuration data model."""

    default_segment_minutes: float = Field(
        default=3.0,
        gt=0,
        description="Travel time between consecutive stops when no trunk corridor covers them"
    )
    initial_occupancy: str = Field(default="LOW", description="Occupancy level of new stations")
    wait_times: WaitTimeConfig = WaitTimeConfig()
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator('initial_occupancy')
    @classmethod
    def validate_initial_occupancy(cls, v):
        """Validate the occupancy level name."""
        valid_levels = [level.value for level in OccupancyLevel]
        if v not in valid_levels:
            raise ValueError(f'initial_occupancy must be one of {valid_levels}')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate and normalize the logging level name."""
        v = v.upper()
        if v not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'Unknown log level: {v}')
        return v


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages network configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                user's config directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[NetworkConfig] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/TransitNetwork/config.json
        Elsewhere, uses XDG_CONFIG_HOME/TransitNetwork/config.json or
        ~/.config/TransitNetwork/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / __app_name__ / "config.json"
            return Path("config.json")

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            config_dir = Path(xdg_config) / __app_name__
        else:
            config_dir = Path.home() / ".config" / __app_name__
        return config_dir / "config.json"

    def load_config(self) -> NetworkConfig:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            NetworkConfig: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            data.pop("version", None)
            self.config = NetworkConfig(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: NetworkConfig) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            config_json = config.model_dump()
            config_json["version"] = __version__

            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config_json, f, indent=2, ensure_ascii=False)

            self.config = config
            logger.info(f"Successfully saved config to: {self.config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        if not self.save_config(NetworkConfig()):
            raise ConfigurationError(f"Failed to create default config at {self.config_path}")
