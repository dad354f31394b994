"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
BuilderGen package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the BuilderGen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get("BUILDERGEN_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("buildergen")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Keep host build tool output free of our records
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "buildergen" or name.startswith("buildergen."):
        return logging.getLogger(name)
    return logging.getLogger(f"buildergen.{name}")


class BuilderGenLogger:
    """
    Specialized logging for the validate-then-synthesize pipeline.

    Each method covers one event that the processor reports while
    working through a round of annotated types.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_synthesis_start(self, type_name: str, accessor_count: int) -> None:
        """
        Log beginning of a builder synthesis run.

        Args:
            type_name: Qualified name of the source type
            accessor_count: Number of accessors visible on the type
        """
        self.logger.info(f"Synthesizing builder for {type_name} ({accessor_count} accessors)")

    def log_diagnostic(self, diagnostic) -> None:
        """
        Log a diagnostic produced during validation or synthesis.

        Args:
            diagnostic: Diagnostic record to report
        """
        self.logger.error(str(diagnostic))

    def log_skipped(self, type_name: str, reason: str) -> None:
        """
        Log that a type was skipped.

        Args:
            type_name: Qualified name of the skipped type
            reason: Why generation did not happen
        """
        self.logger.warning(f"Skipping {type_name}: {reason}")

    def log_written(self, builder_name: str, char_count: int) -> None:
        """
        Log a generated source handed to the sink.

        Args:
            builder_name: Qualified name of the generated builder
            char_count: Size of the generated text
        """
        self.logger.debug(f"Wrote {builder_name} ({char_count} chars)")

    def log_round_summary(self, generated: int, failed: int) -> None:
        """
        Log the outcome of a processing round.

        Args:
            generated: Number of builders written
            failed: Number of types that produced diagnostics
        """
        self.logger.info(f"Round complete: generated={generated}, failed={failed}")


# Initialize logging on module import
setup_logging()
