"""Configuration management for seedtheme builds."""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .theme_engine.errors import ConfigurationError
from .theme_engine.schema import ThemeRequest, Variant

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "seedtheme.yaml"


@dataclass
class ThemeConfig:
    """Build configuration for theme generation."""

    # Generation parameters
    seed: str = "#1f6feb"
    contrast: float = 0.0
    variant: str = Variant.TONAL_SPOT.value
    blend: bool = False
    content: bool = False
    custom_colors: Dict[str, str] = field(default_factory=dict)

    # Output preferences
    format: str = "css"  # css, tailwind, json, stylesheet
    dark_selector: str = ".dark"

    def to_request(self) -> ThemeRequest:
        """Validate the generation parameters into a ThemeRequest."""
        return ThemeRequest.build(
            seed=self.seed,
            contrast=self.contrast,
            variant=self.variant,
            blend=self.blend,
            content=self.content,
            custom_colors=self.custom_colors,
        )

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "seed": self.seed,
            "contrast": self.contrast,
            "variant": self.variant,
            "blend": self.blend,
            "content": self.content,
            "custom_colors": dict(self.custom_colors),
            "format": self.format,
            "dark_selector": self.dark_selector,
        }
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ThemeConfig":
        """Deserialize config from YAML.

        Raises:
            ConfigurationError: If the YAML is invalid or has unknown keys
        """
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid configuration YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a YAML mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        # Variants may be written as enum names or indexes in YAML; an empty
        # value means the default
        if "variant" in data:
            variant = data["variant"]
            data["variant"] = (Variant.TONAL_SPOT if variant is None else Variant.parse(variant)).value

        return cls(**data)


class Config:
    """Configuration manager for seedtheme."""

    _instance: Optional[ThemeConfig] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ThemeConfig:
        """Load configuration from file, or defaults when there is none."""
        if config_path is None:
            config_path = get_default_config_path()

        if config_path.exists():
            try:
                yaml_content = config_path.read_text(encoding="utf-8")
            except OSError as e:
                raise ConfigurationError(f"Cannot read configuration {config_path}: {e}") from e
            config = ThemeConfig.from_yaml(yaml_content)
            logger.debug(f"Loaded configuration from {config_path}")
        else:
            config = ThemeConfig()
            logger.debug(f"No configuration at {config_path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ThemeConfig, config_path: Optional[Path] = None) -> Path:
        """Save configuration to file."""
        if config_path is None:
            config_path = get_default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(config.to_yaml(), encoding="utf-8")
        logger.info(f"Configuration saved to {config_path}")
        return config_path

    @classmethod
    def get(cls) -> ThemeConfig:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls) -> ThemeConfig:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load()


def get_default_config_path() -> Path:
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def get_config() -> ThemeConfig:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ThemeConfig:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ThemeConfig, config_path: Optional[Path] = None) -> Path:
    """Save configuration to file."""
    return Config.save(config, config_path)


def apply_overrides(config: ThemeConfig, **overrides: Any) -> ThemeConfig:
    """Return a copy of ``config`` with every non-None override applied."""
    values = {f.name: getattr(config, f.name) for f in fields(config)}
    values.update({key: value for key, value in overrides.items() if value is not None})
    return ThemeConfig(**values)
