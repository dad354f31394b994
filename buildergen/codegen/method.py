"""
Method text composition.

A MethodComposer collects one method's signature and body with its own
local block stack. The Emitter renders it at whatever depth the emitter
is at when the method is added, so methods line up inside nested blocks.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .base import BlockStack, check_literal, indent
from ..utils.constants import (
    BlockKind,
    Visibility,
    BLOCK_CLOSE,
    BLOCK_OPEN,
    DEFAULT_INDENT,
    DEFAULT_LINE_SEPARATOR,
    SPACE,
    STATIC_KEYWORD,
    VOID_KEYWORD,
)


class MethodComposer:
    """
    Fluent builder for a single method.

    Example::

        MethodComposer("getName")
            .set_visibility(Visibility.PUBLIC)
            .set_return_type("String")
            .add_body_line("return name;")
    """

    def __init__(self, name: str):
        check_literal(name, "method")
        self.name = name
        self.visibility = Visibility.NONE
        self.is_static = False
        self.return_type: Optional[str] = None
        self.parameters: List[Tuple[str, str]] = []
        # (local depth, text) in emission order
        self._lines: List[Tuple[int, str]] = []
        self._blocks = BlockStack()
        self._blocks.push(BlockKind.METHOD, name, protected=True)
        self._finalized = False

    @property
    def depth(self) -> int:
        """Local block depth; 1 while only the method body is open."""
        return self._blocks.depth

    def set_visibility(self, visibility: Visibility) -> "MethodComposer":
        self.visibility = visibility
        return self

    def set_static(self, is_static: bool = True) -> "MethodComposer":
        self.is_static = is_static
        return self

    def set_return_type(self, return_type: Optional[str]) -> "MethodComposer":
        self.return_type = return_type
        return self

    def add_parameter(self, param_type: str, name: str) -> "MethodComposer":
        """Append a parameter; order is kept and names are not checked for collisions."""
        check_literal(name, "parameter")
        self.parameters.append((param_type, name))
        return self

    def add_body_line(self, line: str) -> "MethodComposer":
        self._lines.append((self.depth, line))
        return self

    def add_body_line_and_open_block(self, header: str) -> "MethodComposer":
        """Add ``header {`` and indent following lines one level deeper."""
        self._lines.append((self.depth, header + BLOCK_OPEN))
        self._blocks.push(BlockKind.NESTED, header)
        return self

    def open_block(self) -> "MethodComposer":
        """Open an anonymous ``{`` block."""
        self._lines.append((self.depth, BLOCK_OPEN.strip()))
        self._blocks.push(BlockKind.NESTED)
        return self

    def close_block(self) -> "MethodComposer":
        """Close the innermost nested block; the method body itself stays open."""
        if self._blocks.pop() is not None:
            self._lines.append((self.depth, BLOCK_CLOSE))
        return self

    def finalize(self) -> "MethodComposer":
        """Close every open block, nested ones first, then the method body."""
        if self._finalized:
            return self
        closed = self._blocks.unwind()
        for i, _ in enumerate(closed):
            self._lines.append((len(closed) - i - 1, BLOCK_CLOSE))
        self._finalized = True
        return self

    def signature(self) -> str:
        """Render ``public static T name(A a, B b)`` without the opening brace."""
        parts = [self.visibility.prefix]
        if self.is_static:
            parts.append(STATIC_KEYWORD)
        parts.append(self.return_type if self.return_type else VOID_KEYWORD)
        parts.append(SPACE)
        parts.append(self.name)
        params = ", ".join(f"{ptype} {pname}" for ptype, pname in self.parameters)
        parts.append(f"({params})")
        return "".join(parts)

    def render(
        self,
        external_depth: int = 0,
        indent_unit: str = DEFAULT_INDENT,
        line_separator: str = DEFAULT_LINE_SEPARATOR,
    ) -> str:
        """
        Finalize and render the method.

        The text starts with a line separator, giving the blank line that
        precedes every method, and every line is shifted right by
        ``external_depth`` indent units.
        """
        self.finalize()
        outer = indent(external_depth, indent_unit)
        out = [line_separator, outer, self.signature(), BLOCK_OPEN, line_separator]
        for level, text in self._lines:
            out.append(outer + indent(level, indent_unit) + text + line_separator)
        return "".join(out)
