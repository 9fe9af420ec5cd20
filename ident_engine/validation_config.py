#!/usr/bin/env python3
"""
Validation Config - Manages defaults and enabled countries for identity validation
"""

import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Dict, Any, List, Optional

from ident_engine.data.patterns import CountryCode

logger = logging.getLogger(__name__)

# Engine version - single source of truth
VERSION = "1.0.0"

# Defaults for the public API when the caller passes nothing
DEFAULT_COUNTRY_CODE = "auto"
DEFAULT_IDENTIFIER_TYPE = "National Identity"

# Countries included in auto-mode sweeps
DEFAULT_ENABLED_COUNTRIES = {country.value: True for country in CountryCode}

# Input handling toggles
DEFAULT_OPTIONS = {
    "normalize_unicode": True,   # Fold fullwidth digits, zero-width chars and unicode dashes
}


class ValidationConfig:
    """
    Manages validation settings with persistence
    """

    def __init__(self, config_path: str = None, persist: bool = True):
        """
        Initialize config manager

        Args:
            config_path: Path to config file (default: ~/.ident_engine/config.json)
            persist: When False, hold the shipped defaults in memory only. Nothing
                is read from or written to disk.
        """
        self.config: Dict[str, Any] = self._defaults()
        if not persist:
            self.config_path = None
            return

        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / ".ident_engine" / "config.json"
        self._load_config()

    @staticmethod
    def _defaults() -> Dict[str, Any]:
        return {
            "enabled_countries": DEFAULT_ENABLED_COUNTRIES.copy(),
            "options": DEFAULT_OPTIONS.copy(),
            "created_at": datetime.now().isoformat(),
            "updated_at": datetime.now().isoformat(),
        }

    def _load_config(self):
        """Load config from file if it exists"""
        if not self.config_path.exists():
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                saved = json.load(f)
            if not isinstance(saved, dict):
                raise TypeError(f"expected a JSON object, got {type(saved).__name__}")
            enabled = saved.get("enabled_countries") or {}
            options = saved.get("options") or {}
            if not isinstance(enabled, dict) or not isinstance(options, dict):
                raise TypeError("enabled_countries and options must be JSON objects")
            # Merge with defaults (in case new countries were added)
            self.config["enabled_countries"] = {**DEFAULT_ENABLED_COUNTRIES, **enabled}
            self.config["options"] = {**DEFAULT_OPTIONS, **options}
            self.config["created_at"] = saved.get("created_at", self.config["created_at"])
            self.config["updated_at"] = saved.get("updated_at", self.config["updated_at"])
        except (ValueError, TypeError, OSError) as e:
            logger.warning(f"Ignoring unreadable config {self.config_path}: {e}")

    def save(self):
        """Save config to file"""
        self.config["updated_at"] = datetime.now().isoformat()
        if self.config_path is None:
            return
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_enabled_countries(self) -> Dict[str, bool]:
        """Get all enabled country settings"""
        return self.config["enabled_countries"].copy()

    def is_country_enabled(self, country: CountryCode) -> bool:
        """Check if a country takes part in auto-mode sweeps"""
        return self.config["enabled_countries"].get(country.value, True)

    def set_enabled_country(self, country: CountryCode, enabled: bool):
        """Set whether a country takes part in auto-mode sweeps"""
        self.config["enabled_countries"][country.value] = enabled
        self.save()
        logger.info(f"Country {country.value} {'enabled' if enabled else 'disabled'}")

    def enabled_countries(self) -> List[CountryCode]:
        """Enabled countries as CountryCode members"""
        return [country for country in CountryCode if self.is_country_enabled(country)]

    def get_option(self, name: str) -> Any:
        """Get an input handling option"""
        return self.config["options"].get(name, DEFAULT_OPTIONS.get(name))

    def set_option(self, name: str, value: Any):
        """Set an input handling option"""
        self.config["options"][name] = value
        self.save()
        logger.info(f"Option {name} set to {value!r}")

    def reset(self):
        """Reset all settings to defaults"""
        self.config = self._defaults()
        self.save()

    def is_modified(self) -> bool:
        """Check if config has been modified from defaults"""
        return (
            self.config["enabled_countries"] != DEFAULT_ENABLED_COUNTRIES
            or self.config["options"] != DEFAULT_OPTIONS
        )


# Global instance for convenience
_config_instance: Optional[ValidationConfig] = None


def get_config() -> ValidationConfig:
    """Get the global config instance"""
    global _config_instance
    if _config_instance is None:
        _config_instance = ValidationConfig()
    return _config_instance


def reset_config():
    """Reset the global config to shipped defaults."""
    get_config().reset()
