# wut/config.py
"""
Configuration management for wut.
Uses TOML format for configuration files.
"""
import os
import sys
from pathlib import Path
from typing import List, Optional

# Reader (tomllib for >= 3.11, tomli for < 3.11)
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv

from wut.constants import (
    CONFIG_DIR, HISTORY_MAX_DISTANCE, RULE_TIMEOUT, MAX_DIAGNOSIS_WORKERS,
)
from wut.utils.logging import get_logger

logger = get_logger(__name__)


# --- Configuration Models ---

class CorrectorConfig(BaseModel):
    """Settings for the correction pipeline."""
    history_max_distance: int = Field(HISTORY_MAX_DISTANCE, ge=1, description="Exclusive edit-distance cutoff for history matches")
    rule_timeout: float = Field(RULE_TIMEOUT, gt=0, description="Seconds a diagnosis probe may run before it is killed")
    max_workers: int = Field(MAX_DIAGNOSIS_WORKERS, ge=1, description="Concurrent diagnosis probes")
    use_history: bool = Field(True, description="Fall back to history matching when nothing else applies")


class HistoryConfig(BaseModel):
    """Settings for reading shell history files."""
    enabled: bool = Field(True, description="Read shell history files")
    max_entries: int = Field(5000, ge=1, description="Maximum number of history commands kept")
    shells: List[str] = Field(default_factory=lambda: ["bash", "zsh", "fish"], description="Shells whose history is read")


class AppConfig(BaseModel):
    """Application configuration settings."""
    corrector: CorrectorConfig = Field(default_factory=CorrectorConfig, description="Correction pipeline configuration")
    history: HistoryConfig = Field(default_factory=HistoryConfig, description="Shell history configuration")
    debug: bool = Field(False, description="Enable debug mode")


# --- Configuration Manager ---

class ConfigManager:
    """Manages the configuration for wut using TOML."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config: AppConfig = AppConfig()
        self.CONFIG_DIR = Path(config_dir or os.environ.get("WUT_CONFIG_DIR") or CONFIG_DIR)
        self._logger = logger
        self._load_environment()

    @property
    def config_file(self) -> Path:
        return self.CONFIG_DIR / "config.toml"

    def _load_environment(self) -> None:
        """Loads overrides from environment variables and .env file."""
        load_dotenv()
        debug = os.getenv("WUT_DEBUG")
        if debug is not None:
            self._config.debug = debug.strip().lower() in ("1", "true", "yes", "on")

    def load_config(self) -> None:
        """Loads configuration from the TOML config file."""
        config_file = self.config_file
        if not config_file.exists():
            self._logger.debug(f"Configuration file not found at '{config_file}'. Using defaults.")
            return

        try:
            self._logger.debug(f"Loading configuration from: {config_file}")
            with open(config_file, "rb") as f:
                config_data = tomllib.load(f)

            if isinstance(config_data.get("corrector"), dict):
                self._config.corrector = CorrectorConfig(**config_data["corrector"])

            if isinstance(config_data.get("history"), dict):
                self._config.history = HistoryConfig(**config_data["history"])

            if "debug" in config_data:
                if isinstance(config_data["debug"], bool):
                    self._config.debug = config_data["debug"]
                else:
                    self._logger.warning(f"Invalid type for 'debug' in {config_file}. Expected boolean, got {type(config_data['debug'])}. Ignoring.")

        except (tomllib.TOMLDecodeError, ValidationError) as e:
            self._logger.error(f"Invalid configuration file ({config_file}): {e}")
            self._logger.error("Resetting configuration to default.")
            self._config = AppConfig()
            self._load_environment()
        except OSError as e:
            self._logger.error(f"Cannot read configuration file {config_file}: {e}")
            self._config = AppConfig()
            self._load_environment()

    def save_config(self) -> Path:
        """Saves the current configuration to the config file (as TOML)."""
        config_file = self.config_file
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "wb") as f:
            tomli_w.dump(self._config.model_dump(), f)
        self._logger.info(f"Configuration saved to {config_file}")
        return config_file

    @property
    def config(self) -> AppConfig:
        """Provides read-only access to the current application configuration."""
        return self._config


# --- Global Instance ---

config_manager = ConfigManager()
config_manager.load_config()
