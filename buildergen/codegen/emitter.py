"""
Block-aware Java source emitter.

The Emitter accumulates class text in order: package line, imports, class
header, fields and methods. Every opened block is tracked on an explicit
stack, lines are indented by the current depth, and ``render()`` closes
whatever is still open before returning the text.

Example::

    text = (Emitter()
            .define_package("org.example")
            .add_import("java.util.List")
            .define_class(Visibility.PUBLIC, "Person")
            .add_field(Visibility.PRIVATE, "String", "name")
            .render())
"""

from __future__ import annotations

from typing import List, Optional

from .base import BlockStack, check_literal, indent
from .method import MethodComposer
from ..utils.constants import (
    BlockKind,
    Visibility,
    BLOCK_CLOSE,
    BLOCK_OPEN,
    CLASS_KEYWORD,
    DEFAULT_INDENT,
    DEFAULT_LINE_SEPARATOR,
    EXTENDS_KEYWORD,
    IMPORT_KEYWORD,
    PACKAGE_KEYWORD,
    SEMICOLON,
    SPACE,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)


class Emitter:
    """
    Fluent accumulator for one Java type definition.

    The line separator and indent unit are fixed at construction, so the
    same calls always give the same text regardless of platform.
    """

    def __init__(self, line_separator: str = DEFAULT_LINE_SEPARATOR, indent_unit: str = DEFAULT_INDENT):
        self.line_separator = line_separator
        self.indent_unit = indent_unit
        self._parts: List[str] = []
        self._blocks = BlockStack()

    @property
    def depth(self) -> int:
        """Number of currently open blocks."""
        return self._blocks.depth

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def define_package(self, name: Optional[str]) -> "Emitter":
        """Emit ``package name;`` and a blank line; None or "" means the unnamed package."""
        if name == "":
            return self
        if check_literal(name, "package"):
            self._append(PACKAGE_KEYWORD + name)
            self._end_statement()
            self._append(self.line_separator)
        return self

    def add_import(self, name: str) -> "Emitter":
        """Emit ``import name;``."""
        if check_literal(name, "import"):
            self._append_indented(IMPORT_KEYWORD + name)
            self._end_statement()
        return self

    def define_class(self, visibility: Visibility, name: str, superclass: Optional[str] = None) -> "Emitter":
        """Emit a class header, preceded by a blank line, and open its block."""
        check_literal(name, "class")
        header = visibility.prefix + CLASS_KEYWORD + name
        if check_literal(superclass, "superclass"):
            header += EXTENDS_KEYWORD + superclass
        self._append(self.line_separator)
        self._append_indented(header)
        self._open_block(BlockKind.CLASS, header)
        return self

    def add_field(
        self,
        visibility: Visibility,
        field_type: str,
        name: str,
        default_value: Optional[str] = None,
    ) -> "Emitter":
        """Emit ``private T name = default;``; the initializer is omitted when None."""
        check_literal(name, "field")
        line = visibility.prefix + field_type + SPACE + name
        if default_value is not None:
            line += " = " + default_value
        self._append_indented(line)
        self._end_statement()
        return self

    def add_method(self, method: MethodComposer) -> "Emitter":
        """Render ``method`` at the current depth and append it."""
        self._append(method.render(self.depth, self.indent_unit, self.line_separator))
        return self

    def add_custom_line(self, line: str) -> "Emitter":
        """Append ``line`` verbatim at the current indentation."""
        self._append_indented(line)
        self._append(self.line_separator)
        return self

    def add_custom_block_open(self, header: str) -> "Emitter":
        """Append ``header {`` and open a block, e.g. ``static {``."""
        self._append_indented(header)
        self._open_block(BlockKind.CUSTOM, header)
        return self

    def close_current_block(self) -> "Emitter":
        """Close the innermost open block; a no-op when nothing is open."""
        if self._blocks.pop() is None:
            return self
        self._append_indented(BLOCK_CLOSE)
        if self.depth > 0:
            self._append(self.line_separator)
        return self

    def render(self) -> str:
        """Close every open block, innermost first, and return the text."""
        while self.depth > 0:
            self.close_current_block()
        return "".join(self._parts)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _append(self, text: str) -> None:
        self._parts.append(text)

    def _append_indented(self, text: str) -> None:
        self._parts.append(indent(self.depth, self.indent_unit) + text)

    def _end_statement(self) -> None:
        self._parts.append(SEMICOLON + self.line_separator)

    def _open_block(self, kind: BlockKind, header: str) -> None:
        self._parts.append(BLOCK_OPEN + self.line_separator)
        self._blocks.push(kind, header)
        logger.debug(f"Opened {kind.value} block at depth {self.depth}")
