"""
Utils package for BuilderGen.

This module provides the shared constants, naming helpers, configuration,
logging and exception types used by the emitter and synthesizer.
"""

# Core utilities
from .exceptions import (
    BuilderGenError,
    InvalidLiteralError,
    SinkWriteError,
    SourceParseError,
    ConfigurationError,
)
from .constants import Visibility, BlockKind, AccessorKind
from .naming import (
    AccessorName,
    parse_accessor_name,
    field_name_for,
    adder_name_for,
    setter_name_for,
    qualify,
)

# Configuration and logging
from .config import (
    BuilderGenConfig,
    GenerationConfig,
    ValidationConfig,
    OutputConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from .logging import get_logger, setup_logging, BuilderGenLogger

__all__ = [
    # Exceptions
    "BuilderGenError",
    "InvalidLiteralError",
    "SinkWriteError",
    "SourceParseError",
    "ConfigurationError",

    # Constants
    "Visibility",
    "BlockKind",
    "AccessorKind",

    # Naming
    "AccessorName",
    "parse_accessor_name",
    "field_name_for",
    "adder_name_for",
    "setter_name_for",
    "qualify",

    # Configuration
    "BuilderGenConfig",
    "GenerationConfig",
    "ValidationConfig",
    "OutputConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "BuilderGenLogger",
]
