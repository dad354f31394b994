"""
Configuration System for BuilderGen.

This module provides a unified configuration interface for builder
generation. Settings are read from a single YAML or JSON file with a
small set of environment variable overrides.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass

import yaml

from .constants import (
    DEFAULT_LINE_SEPARATOR,
    DEFAULT_INDENT,
    DEFAULT_BUILDER_SUFFIX,
    DEFAULT_FACTORY_METHOD,
)
from .exceptions import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)

_TRUE_VALUES = ("1", "true", "yes")


@dataclass
class GenerationConfig:
    """Text emission and naming configuration."""

    line_separator: str = DEFAULT_LINE_SEPARATOR
    indent: str = DEFAULT_INDENT
    builder_suffix: str = DEFAULT_BUILDER_SUFFIX
    factory_method_name: str = DEFAULT_FACTORY_METHOD


@dataclass
class ValidationConfig:
    """Precondition checks applied before synthesis."""

    strict_pojo_check: bool = False
    require_no_arg_constructor: bool = True


@dataclass
class OutputConfig:
    """Where generated sources are written."""

    output_dir: str = "generated-sources"
    file_extension: str = ".java"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "buildergen.log"


class BuilderGenConfig:
    """
    Unified configuration manager for BuilderGen.

    A configuration file is optional; every section falls back to its
    dataclass defaults. ``BUILDERGEN_STRICT_POJO`` and
    ``BUILDERGEN_OUTPUT_DIR`` override the file.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.generation = self._create_generation_config()
        self.validation = self._create_validation_config()
        self.output = self._create_output_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: working directory, YAML first, then JSON
        yaml_config = Path.cwd() / "buildergen.yaml"
        json_config = Path.cwd() / "buildergen.json"
        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in (".yaml", ".yml"):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration from {self.config_file}: {e}")

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration root in {self.config_file} must be a mapping")

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _section(self, name: str) -> Dict[str, Any]:
        data = self._config_data.get(name) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Section '{name}' must be a mapping", key=name)
        return data

    def _create_generation_config(self) -> GenerationConfig:
        """Create generation configuration from loaded data."""
        gen_data = self._section("generation")

        config = GenerationConfig(
            line_separator=gen_data.get("line_separator", DEFAULT_LINE_SEPARATOR),
            indent=gen_data.get("indent", DEFAULT_INDENT),
            builder_suffix=gen_data.get("builder_suffix", DEFAULT_BUILDER_SUFFIX),
            factory_method_name=gen_data.get("factory_method_name", DEFAULT_FACTORY_METHOD),
        )
        if config.line_separator not in ("\n", "\r\n"):
            raise ConfigurationError("line_separator must be '\\n' or '\\r\\n'", key="generation.line_separator")
        if not config.builder_suffix or not config.factory_method_name:
            raise ConfigurationError("builder_suffix and factory_method_name cannot be empty", key="generation")
        return config

    def _create_validation_config(self) -> ValidationConfig:
        """Create validation configuration from loaded data."""
        val_data = self._section("validation")

        env_strict = os.getenv("BUILDERGEN_STRICT_POJO", "").lower() in _TRUE_VALUES
        strict = env_strict or bool(val_data.get("strict_pojo_check", False))

        return ValidationConfig(
            strict_pojo_check=strict,
            require_no_arg_constructor=bool(val_data.get("require_no_arg_constructor", True)),
        )

    def _create_output_config(self) -> OutputConfig:
        """Create output configuration from loaded data."""
        out_data = self._section("output")

        output_dir = os.getenv("BUILDERGEN_OUTPUT_DIR") or out_data.get("output_dir", "generated-sources")

        return OutputConfig(
            output_dir=output_dir,
            file_extension=out_data.get("file_extension", ".java"),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=log_data.get("level", "INFO"),
            enable_file_logging=bool(log_data.get("enable_file_logging", False)),
            log_file=log_data.get("log_file", "buildergen.log"),
        )

    def is_strict(self) -> bool:
        """Check if the POJO-shape check runs in strict mode."""
        return self.validation.strict_pojo_check

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective configuration as plain data."""
        return {
            "generation": {
                "line_separator": self.generation.line_separator,
                "indent": self.generation.indent,
                "builder_suffix": self.generation.builder_suffix,
                "factory_method_name": self.generation.factory_method_name,
            },
            "validation": {
                "strict_pojo_check": self.validation.strict_pojo_check,
                "require_no_arg_constructor": self.validation.require_no_arg_constructor,
            },
            "output": {
                "output_dir": self.output.output_dir,
                "file_extension": self.output.file_extension,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self, path: Optional[str] = None) -> Path:
        """Save current configuration to file."""
        target = Path(path) if path else self.config_file
        data = self.to_dict()
        with open(target, "w", encoding="utf-8") as f:
            if target.suffix.lower() in (".yaml", ".yml"):
                yaml.safe_dump(data, f, sort_keys=False)
            else:
                json.dump(data, f, indent=2)
        logger.info(f"Configuration saved to {target}")
        return target


# Global configuration instance
_global_config: Optional[BuilderGenConfig] = None


def get_config() -> BuilderGenConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = BuilderGenConfig()
    return _global_config


def set_config(config: Optional[BuilderGenConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> BuilderGenConfig:
    """Load configuration from a specific file."""
    return BuilderGenConfig(config_file)
