"""Application settings and configuration management."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from tdeecalc.profiles.body_calc import PlausibilityLimits

OUTPUT_FORMATS = ("table", "json", "markdown", "csv")


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".tdeecalc"


def default_config_path() -> Path:
    """Return the default config file path."""
    return _default_config_dir() / "config.yaml"


def _section(data: dict, name: str) -> dict:
    """Return a top-level config section, which must be a mapping."""
    section = data[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' must be a mapping, got {section!r}")
    return section


def _parse_bound(key: str, value) -> float:
    """Parse a plausibility bound as a finite number."""
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        bound = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None
    if not math.isfinite(bound):
        raise ValueError(f"{key} must be finite, got {value!r}")
    return bound


@dataclass
class PlausibilityConfig:
    """Bounds for unit advisories on estimator inputs."""

    height_min_cm: float = 100.0
    height_max_cm: float = 250.0
    weight_min_kg: float = 30.0
    weight_max_kg: float = 250.0
    age_max_years: float = 100.0

    def to_limits(self) -> PlausibilityLimits:
        """Convert to the estimator's PlausibilityLimits."""
        return PlausibilityLimits(
            height_min_cm=self.height_min_cm,
            height_max_cm=self.height_max_cm,
            weight_min_kg=self.weight_min_kg,
            weight_max_kg=self.weight_max_kg,
            age_max_years=self.age_max_years,
        )


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table", "json", "markdown", "csv"


@dataclass
class Settings:
    """Main application settings."""

    plausibility: PlausibilityConfig = field(default_factory=PlausibilityConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.tdeecalc/config.yaml

        Returns:
            Settings instance

        Raises:
            ValueError: If a setting has the wrong type or an unknown value
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")

        settings = cls()

        # Parse plausibility bounds
        if "plausibility" in data:
            bounds = _section(data, "plausibility")
            for name in (
                "height_min_cm",
                "height_max_cm",
                "weight_min_kg",
                "weight_max_kg",
                "age_max_years",
            ):
                if name in bounds:
                    value = _parse_bound(f"plausibility.{name}", bounds[name])
                    setattr(settings.plausibility, name, value)

        # Parse defaults
        if "defaults" in data:
            def_data = _section(data, "defaults")
            if "output_format" in def_data:
                output_format = str(def_data["output_format"])
                if output_format not in OUTPUT_FORMATS:
                    raise ValueError(
                        f"defaults.output_format must be one of {OUTPUT_FORMATS}, "
                        f"got '{output_format}'"
                    )
                settings.defaults.output_format = output_format

        return settings

    def to_dict(self) -> dict:
        """Convert to the nested dict written to config.yaml."""
        return {
            "plausibility": {
                "height_min_cm": self.plausibility.height_min_cm,
                "height_max_cm": self.plausibility.height_max_cm,
                "weight_min_kg": self.plausibility.weight_min_kg,
                "weight_max_kg": self.plausibility.weight_max_kg,
                "age_max_years": self.plausibility.age_max_years,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.tdeecalc/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None
_config_path: Optional[Path] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load(_config_path)
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk.

    Args:
        config_path: Config file to use from now on. If None, keeps the
            previously selected file (or the default)
    """
    global _settings, _config_path
    if config_path is not None:
        _config_path = config_path
    _settings = Settings.load(_config_path)
    return _settings


def active_config_path() -> Path:
    """Return the config file the global settings are read from."""
    return _config_path or default_config_path()


def use_config_path(config_path: Path) -> None:
    """Select the config file; it is read on the next get_settings()."""
    global _settings, _config_path
    _config_path = config_path
    _settings = None
