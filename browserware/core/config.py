"""Configuration management for browserware."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .constants import CONFIG_FILE, CONFIG_VERSION, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass(frozen=True)
class DetectionSettings:
    """Tunables consumed by the platform resolvers."""

    probe_versions: bool = True
    version_timeout: Optional[float] = None
    extra_desktop_dirs: tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> DetectionSettings:
        """Build from a validated settings dictionary."""
        return cls(
            probe_versions=settings.get("probe_versions", True),
            version_timeout=settings.get("version_timeout"),
            extra_desktop_dirs=tuple(
                Path(p).expanduser() for p in settings.get("extra_desktop_dirs", [])
            ),
        )


class ConfigManager:
    """Manages configuration loading, validation, and persistence."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or CONFIG_FILE
        self._config: dict[str, Any] = {}
        self.load()

    def _ensure_directories(self) -> None:
        """Create the config directory if it doesn't exist."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

    def _create_default_config(self) -> dict[str, Any]:
        """Generate default configuration."""
        return {
            "version": CONFIG_VERSION,
            "settings": json.loads(json.dumps(DEFAULT_SETTINGS)),
        }

    def _validate_settings(self, settings: dict[str, Any]) -> list[str]:
        """Validate the settings block and return list of errors."""
        errors = []

        probe = settings.get("probe_versions", True)
        if not isinstance(probe, bool):
            errors.append("'probe_versions' must be a boolean")

        timeout = settings.get("version_timeout")
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                errors.append("'version_timeout' must be a number or null")
            elif timeout <= 0:
                errors.append("'version_timeout' must be positive")

        extra_dirs = settings.get("extra_desktop_dirs", [])
        if not isinstance(extra_dirs, list):
            errors.append("'extra_desktop_dirs' must be a list")
        else:
            for i, entry in enumerate(extra_dirs):
                if not isinstance(entry, str) or not entry:
                    errors.append(f"extra_desktop_dirs entry {i} is not a non-empty string")

        return errors

    def _validate_config(self, config: dict[str, Any]) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not isinstance(config, dict):
            return ["Configuration root must be an object"]

        if not isinstance(config.get("version"), int):
            errors.append("Missing or invalid 'version' field")

        settings = config.get("settings")
        if not isinstance(settings, dict):
            errors.append("Missing or invalid 'settings' field")
        else:
            errors.extend(self._validate_settings(settings))

        return errors

    def load(self) -> None:
        """Load configuration from file, creating defaults if needed."""
        if not self.config_path.exists():
            logger.info("Config file not found, creating defaults at %s", self.config_path)
            self._config = self._create_default_config()
            self.save()
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e

        errors = self._validate_config(loaded_config)
        if errors:
            for error in errors:
                logger.error("Config validation error: %s", error)
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

        self._config = loaded_config
        logger.debug("Configuration loaded from %s", self.config_path)

    def save(self) -> None:
        """Save current configuration to file."""
        self._ensure_directories()
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2)
        logger.debug("Configuration saved to %s", self.config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Return a copy of the current configuration."""
        return self._config.copy()

    @property
    def settings(self) -> dict[str, Any]:
        """Return application settings."""
        return self._config.get("settings", {}).copy()

    def update_settings(self, **kwargs: Any) -> None:
        """Update settings with provided values after validation."""
        merged = {**self.settings, **kwargs}
        errors = self._validate_settings(merged)
        if errors:
            raise ConfigError(f"Invalid settings: {'; '.join(errors)}")
        self._config["settings"] = merged

    def detection_settings(self) -> DetectionSettings:
        """Return the settings consumed by detection."""
        return DetectionSettings.from_settings(self.settings)
