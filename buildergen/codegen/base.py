"""
Shared building blocks for the text emitters.

The Emitter and MethodComposer both track open structural blocks with a
BlockStack and both validate identifier-like tokens with check_literal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.constants import BlockKind
from ..utils.exceptions import InvalidLiteralError


@dataclass(frozen=True)
class Block:
    """One open block: its kind and the header text that opened it."""

    kind: BlockKind
    header: str = ""


@dataclass
class BlockStack:
    """
    Explicit LIFO tracker of open blocks.

    The depth of the stack drives indentation. ``base`` entries can be
    protected from ``pop`` so that a method body is only closed on unwind.
    """

    _blocks: List[Block] = field(default_factory=list)
    _protected: int = 0

    @property
    def depth(self) -> int:
        return len(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def push(self, kind: BlockKind, header: str = "", protected: bool = False) -> Block:
        block = Block(kind, header)
        self._blocks.append(block)
        if protected:
            self._protected = len(self._blocks)
        return block

    def pop(self) -> Optional[Block]:
        """Pop the innermost block; returns None at or below the protected base."""
        if len(self._blocks) <= self._protected:
            return None
        return self._blocks.pop()

    def peek(self) -> Optional[Block]:
        return self._blocks[-1] if self._blocks else None

    def unwind(self) -> List[Block]:
        """Pop every block, protected ones included, innermost first."""
        closed = list(reversed(self._blocks))
        self._blocks.clear()
        self._protected = 0
        return closed


def check_literal(value: Optional[str], position: str = "") -> bool:
    """
    Validate an identifier or qualified name.

    Returns False for None (the caller treats the slot as absent) and True
    for a usable token.

    Raises:
        InvalidLiteralError: if ``value`` is empty or contains whitespace
    """
    if value is None:
        return False
    if not value or any(ch.isspace() for ch in value):
        raise InvalidLiteralError(value, position)
    return True


def indent(level: int, unit: str) -> str:
    """Indentation string for ``level`` open blocks."""
    return unit * max(level, 0)
