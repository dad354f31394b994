"""
Code generation package for BuilderGen.

This package holds the block-aware text emitters used to produce Java
source: the class-level Emitter and the per-method MethodComposer.
"""

from .base import Block, BlockStack, check_literal
from .emitter import Emitter
from .method import MethodComposer

__all__ = [
    "Block",
    "BlockStack",
    "check_literal",
    "Emitter",
    "MethodComposer",
]
