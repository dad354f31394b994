"""
Unit tests for logging utilities.

Tests the logging configuration and the pipeline logger used by the
processor.
"""

import logging
import os
import tempfile
from unittest.mock import patch

import pytest

from buildergen.model import Diagnostic, DiagnosticKind
from buildergen.utils.logging import BuilderGenLogger, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging("INFO")


class TestLoggingSetup:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self):
        """Test default logging setup."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("BUILDERGEN_LOG_LEVEL", None)
            setup_logging()

        logger = logging.getLogger("buildergen")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_logging_debug_level(self):
        """Test logging setup with debug level."""
        setup_logging(level="DEBUG")
        assert logging.getLogger("buildergen").level == logging.DEBUG

    def test_setup_logging_lowercase_level(self):
        """Test that level names are case-insensitive."""
        setup_logging(level="warning")
        assert logging.getLogger("buildergen").level == logging.WARNING

    def test_setup_logging_invalid_level(self):
        """Test logging setup with invalid level defaults to INFO."""
        setup_logging(level="INVALID")
        assert logging.getLogger("buildergen").level == logging.INFO

    def test_setup_logging_with_file(self):
        """Test logging setup with file output."""
        with tempfile.NamedTemporaryFile(suffix=".log", delete=False) as f:
            log_file = f.name

        try:
            setup_logging(log_file=log_file)

            logger = logging.getLogger("buildergen")
            handler_types = [type(h).__name__ for h in logger.handlers]
            assert "StreamHandler" in handler_types
            assert "FileHandler" in handler_types

            logger.info("Test message")
            for handler in logger.handlers:
                handler.flush()

            with open(log_file, "r") as f:
                assert "Test message" in f.read()
        finally:
            setup_logging("INFO")
            if os.path.exists(log_file):
                os.unlink(log_file)

    def test_setup_logging_environment_variable(self):
        """Test logging setup with environment variable."""
        with patch.dict(os.environ, {"BUILDERGEN_LOG_LEVEL": "ERROR"}):
            setup_logging()
            assert logging.getLogger("buildergen").level == logging.ERROR

    def test_repeated_setup_does_not_stack_handlers(self):
        """Test that handlers are replaced, not accumulated."""
        setup_logging("INFO")
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(logging.getLogger("buildergen").handlers) == 1


class TestGetLogger:
    """Test logger naming."""

    def test_plain_name_is_namespaced(self):
        """Test that foreign names are placed under the package logger."""
        assert get_logger("worker").name == "buildergen.worker"

    def test_module_name_kept(self):
        """Test that package module names are used as they are."""
        assert get_logger("buildergen.codegen.emitter").name == "buildergen.codegen.emitter"
        assert get_logger("buildergen").name == "buildergen"

    def test_similar_prefix_is_namespaced(self):
        """Test that a name merely starting with the package name is namespaced."""
        assert get_logger("buildergenx").name == "buildergen.buildergenx"


class TestBuilderGenLogger:
    """Test pipeline event logging."""

    def test_events(self, caplog):
        """Test that each event is logged at its level."""
        setup_logging("DEBUG")
        log = BuilderGenLogger("processor")
        # records are captured on the component logger directly
        log.logger.addHandler(caplog.handler)
        try:
            log.log_synthesis_start("org.example.Person", 4)
            log.log_skipped("org.example.Bad", "NotAPojo")
            log.log_written("org.example.PersonBuilder", 120)
            log.log_round_summary(1, 1)
            log.log_diagnostic(Diagnostic(DiagnosticKind.NOT_A_POJO, "Class X is not POJO.", "X"))
        finally:
            log.logger.removeHandler(caplog.handler)

        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (logging.INFO, "Synthesizing builder for org.example.Person (4 accessors)") in levels
        assert (logging.WARNING, "Skipping org.example.Bad: NotAPojo") in levels
        assert (logging.DEBUG, "Wrote org.example.PersonBuilder (120 chars)") in levels
        assert (logging.INFO, "Round complete: generated=1, failed=1") in levels
        assert (logging.ERROR, "[NotAPojo] X: Class X is not POJO.") in levels

    def test_logger_name(self):
        """Test the component logger name."""
        assert BuilderGenLogger("processor").logger.name == "buildergen.processor"
