"""Configuration management for batchrm."""

import json
import logging
from pathlib import Path
from typing import Any

from .constants import CONFIG_FILE, CONFIG_VERSION, DEFAULT_SETTINGS, LOGS_DIR
from .models import RunOptions

logger = logging.getLogger(__name__)

# Settings that map one-to-one onto RunOptions fields
RUN_OPTION_SETTINGS = ("stop_on_error", "show_detail", "print_summary")


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


class ConfigManager:
    """Loads, validates and persists default settings for the CLI."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else CONFIG_FILE
        self._config: dict[str, Any] = {}
        self.load()

    def _create_default_config(self) -> dict[str, Any]:
        """Generate default configuration."""
        return {
            "version": CONFIG_VERSION,
            "settings": DEFAULT_SETTINGS.copy(),
        }

    def _validate_config(self, config: Any) -> list[str]:
        """Validate configuration and return list of errors."""
        if not isinstance(config, dict):
            return ["Configuration must be a JSON object"]

        errors = []

        if not isinstance(config.get("version"), int):
            errors.append("Missing or invalid 'version' field")

        settings = config.get("settings")
        if not isinstance(settings, dict):
            errors.append("Missing or invalid 'settings' field")
            return errors

        for key, value in settings.items():
            if key not in DEFAULT_SETTINGS:
                errors.append(f"Unknown setting '{key}'")
            elif not isinstance(value, bool):
                errors.append(f"Setting '{key}' must be true or false")

        return errors

    def load(self) -> None:
        """Load configuration from file, creating defaults if needed."""
        if not self.config_path.exists():
            logger.debug("Config file not found, creating defaults at %s", self.config_path)
            self._config = self._create_default_config()
            self.save()
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"Config file is not valid UTF-8: {e}") from e

        errors = self._validate_config(loaded_config)
        if errors:
            for error in errors:
                logger.error("Config validation error: %s", error)
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

        self._config = loaded_config
        logger.debug("Configuration loaded from %s", self.config_path)

    def save(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2)
        logger.debug("Configuration saved to %s", self.config_path)

    @property
    def settings(self) -> dict[str, Any]:
        """Return settings, filled in with defaults for missing keys."""
        merged = DEFAULT_SETTINGS.copy()
        merged.update(self._config.get("settings", {}))
        return merged

    @property
    def log_dir(self) -> Path:
        """Directory for log files, next to the settings file."""
        return self.config_path.parent / LOGS_DIR.name

    def build_options(self, dry_run: bool = False, **overrides: bool | None) -> RunOptions:
        """
        Build the immutable run options from settings.

        Args:
            dry_run: Simulate the run
            **overrides: Values for stop_on_error, show_detail or
                print_summary. None leaves the configured value in place.

        Returns:
            RunOptions for a single run
        """
        settings = self.settings
        values = {key: settings[key] for key in RUN_OPTION_SETTINGS}
        for key, value in overrides.items():
            if key not in RUN_OPTION_SETTINGS:
                raise ConfigError(f"Unknown run option '{key}'")
            if value is not None:
                values[key] = value
        return RunOptions(dry_run=dry_run, **values)
