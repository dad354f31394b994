"""
Custom exception definitions.

This module defines the exception hierarchy for BuilderGen-specific
errors raised while emitting, reading sources and writing output.
"""

from typing import Optional


class BuilderGenError(Exception):
    """
    Base exception for all BuilderGen-related errors.

    This is the root exception class for all BuilderGen-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize BuilderGen error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class InvalidLiteralError(BuilderGenError):
    """
    Raised when a token meant to be a single identifier is malformed.

    Package, import, class, field and method names must be non-empty
    and free of whitespace.
    """

    def __init__(self, literal: Optional[str], position: str = ""):
        """
        Initialize invalid literal error.

        Args:
            literal: The offending token
            position: Where the token was supplied (e.g. "package")
        """
        details = {"literal": repr(literal)}
        if position:
            details["position"] = position
        super().__init__("Literals cannot be empty or contain whitespace.", details)
        self.literal = literal
        self.position = position


class SinkWriteError(BuilderGenError):
    """
    Raised when generated text cannot be persisted.
    """

    def __init__(self, qualified_name: str, reason: str = ""):
        """
        Initialize sink write error.

        Args:
            qualified_name: Name of the generated type being written
            reason: Underlying cause
        """
        message = f"Cannot create source class '{qualified_name}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, {"type": qualified_name})
        self.qualified_name = qualified_name
        self.reason = reason


class SourceParseError(BuilderGenError):
    """
    Raised when a Java compilation unit cannot be read.
    """

    def __init__(self, message: str, source_file: Optional[str] = None):
        """
        Initialize source parse error.

        Args:
            message: Error description
            source_file: Optional path of the failing file
        """
        details = {}
        if source_file is not None:
            details["file"] = source_file
        super().__init__(message, details)
        self.source_file = source_file


class ConfigurationError(BuilderGenError):
    """
    Raised when a configuration file holds unusable values.
    """

    def __init__(self, message: str, key: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            key: Optional configuration key at fault
        """
        details = {}
        if key is not None:
            details["key"] = key
        super().__init__(message, details)
        self.key = key
