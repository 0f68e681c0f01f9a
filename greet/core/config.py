"""
Configuration File Support for greet.

Provides TOML-based configuration for ambient settings:
- Default config location (~/.greet/config.toml)
- Environment variable overrides (GREET_*)
- Config validation and error messages

Configuration never changes what a greeting says; it only controls
logging and console colors.
"""

import os
import tomllib
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class OutputConfig:
    """Output configuration."""
    color_enabled: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutputConfig":
        """Create from dictionary."""
        return cls(
            color_enabled=data.get("color_enabled", True),
        )


@dataclass
class AdvancedConfig:
    """Advanced configuration."""
    log_level: str = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdvancedConfig":
        """Create from dictionary."""
        return cls(
            log_level=data.get("log_level", "WARNING"),
        )


@dataclass
class GreetConfig:
    """Complete greet configuration."""
    output: OutputConfig = field(default_factory=OutputConfig)
    advanced: AdvancedConfig = field(default_factory=AdvancedConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "output": self.output.to_dict(),
            "advanced": self.advanced.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GreetConfig":
        """Create from dictionary."""
        return cls(
            output=OutputConfig.from_dict(data.get("output", {})),
            advanced=AdvancedConfig.from_dict(data.get("advanced", {})),
        )


class ConfigError(Exception):
    """Configuration error."""
    pass


class ConfigManager:
    """
    Configuration file manager.

    Sources, lowest to highest priority:
    1. Built-in defaults
    2. User config (~/.greet/config.toml)
    3. Environment variables (GREET_*)
    4. CLI arguments
    """

    DEFAULT_USER_CONFIG = Path.home() / ".greet" / "config.toml"
    ENV_PREFIX = "GREET_"

    def __init__(
        self,
        user_config_path: Optional[Path] = None,
        load_env: bool = True
    ):
        """
        Initialize ConfigManager.

        Args:
            user_config_path: Custom user config path
            load_env: Whether to load from environment variables
        """
        self.user_config_path = user_config_path or self.DEFAULT_USER_CONFIG
        self.load_env = load_env

        self._config = GreetConfig()
        self._loaded_sources: List[str] = ["defaults"]

    def load(self) -> GreetConfig:
        """
        Load configuration from all sources.

        Returns:
            Merged GreetConfig

        Raises:
            ConfigError: If the user config file cannot be read or parsed
        """
        self._config = GreetConfig()
        self._loaded_sources = ["defaults"]

        if self.user_config_path.exists():
            try:
                self._load_toml_file(self.user_config_path)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Error loading user config: {e}") from e
            self._loaded_sources.append(f"user:{self.user_config_path}")

        if self.load_env:
            self._load_environment()

        return self._config

    def get_loaded_sources(self) -> List[str]:
        """Get list of loaded configuration sources."""
        return self._loaded_sources.copy()

    def validate(self) -> List[str]:
        """
        Validate current configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self._config.advanced.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"advanced.log_level must be one of: {', '.join(VALID_LOG_LEVELS)}")

        return errors

    def _load_toml_file(self, path: Path) -> None:
        """Load and merge a TOML config file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        self._merge_config(data)

    def _merge_config(self, data: Dict[str, Any]) -> None:
        """Merge loaded config data into current config."""
        if "output" in data:
            self._config.output = OutputConfig.from_dict({
                **self._config.output.to_dict(),
                **data["output"]
            })

        if "advanced" in data:
            self._config.advanced = AdvancedConfig.from_dict({
                **self._config.advanced.to_dict(),
                **data["advanced"]
            })

    def _load_environment(self) -> None:
        """Load configuration from environment variables."""
        env_mappings = {
            f"{self.ENV_PREFIX}COLOR": ("output", "color_enabled", self._parse_bool),
            f"{self.ENV_PREFIX}LOG_LEVEL": ("advanced", "log_level", str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                section_obj = getattr(self._config, section)
                setattr(section_obj, key, converter(value))
                if "environment" not in self._loaded_sources:
                    self._loaded_sources.append("environment")

    @staticmethod
    def _parse_bool(value: str) -> bool:
        """Parse boolean from string."""
        return value.lower() in ("true", "1", "yes", "on")
