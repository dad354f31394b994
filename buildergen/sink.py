"""
Destinations for generated sources.

FileSink lays files out by package under an output directory and writes
through a temporary file, so a failed write never leaves a partial file
behind. MemorySink keeps texts in a dict for tests and in-process hosts.
"""

from __future__ import annotations

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict

from .utils.exceptions import SinkWriteError
from .utils.logging import get_logger

logger = get_logger(__name__)


class SourceSink(ABC):
    """Accepts rendered text keyed by the generated type's qualified name."""

    @abstractmethod
    def write(self, qualified_name: str, text: str) -> None:
        """
        Persist ``text``.

        Raises:
            SinkWriteError: if the text could not be stored
        """


class MemorySink(SourceSink):
    """Collects generated sources in insertion order."""

    def __init__(self):
        self.sources: Dict[str, str] = {}

    def write(self, qualified_name: str, text: str) -> None:
        self.sources[qualified_name] = text

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self.sources

    def __getitem__(self, qualified_name: str) -> str:
        return self.sources[qualified_name]


class FileSink(SourceSink):
    """Writes ``org.example.PersonBuilder`` to ``<root>/org/example/PersonBuilder.java``."""

    def __init__(self, output_dir: str, file_extension: str = ".java"):
        self.output_dir = Path(output_dir)
        self.file_extension = file_extension

    def path_for(self, qualified_name: str) -> Path:
        parts = qualified_name.split(".")
        return self.output_dir.joinpath(*parts[:-1], parts[-1] + self.file_extension)

    def write(self, qualified_name: str, text: str) -> None:
        target = self.path_for(qualified_name)
        tmp_path = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".buildergen-", suffix=".tmp", dir=target.parent)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            os.replace(tmp_path, target)
            tmp_path = None
        except (OSError, UnicodeError) as e:
            raise SinkWriteError(qualified_name, str(e)) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
        logger.debug(f"Wrote {target}")
