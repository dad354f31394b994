"""
Constants and Enumerations for BuilderGen.

This module consolidates the constant definitions used across the package,
providing a single source of truth for emitted tokens, Java type names and
accessor naming conventions.
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# Emitted Text Tokens
# =============================================================================

DEFAULT_LINE_SEPARATOR = "\n"
DEFAULT_INDENT = "\t"

SPACE = " "
SEMICOLON = ";"
BLOCK_OPEN = " {"
BLOCK_CLOSE = "}"
PACKAGE_KEYWORD = "package "
IMPORT_KEYWORD = "import "
CLASS_KEYWORD = "class "
EXTENDS_KEYWORD = " extends "
STATIC_KEYWORD = "static "
VOID_KEYWORD = "void"
NULL_LITERAL = "null"
EMPTY_STRING_LITERAL = '""'


class Visibility(Enum):
    """Access modifiers for generated declarations."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    PACKAGE = "package"
    NONE = "none"

    @property
    def prefix(self) -> str:
        """Modifier text as it precedes a declaration (with trailing space)."""
        if self in (Visibility.PACKAGE, Visibility.NONE):
            return ""
        return f"{self.value} "


class BlockKind(Enum):
    """Kinds of structural blocks tracked while emitting text."""

    CLASS = "class"
    CUSTOM = "custom"
    METHOD = "method"
    NESTED = "nested"


# =============================================================================
# Java Type Constants
# =============================================================================

SEQUENCE_TYPES = frozenset({"java.util.List", "List"})
SET_TYPES = frozenset({"java.util.Set", "Set"})
STRING_TYPES = frozenset({"java.lang.String", "String"})

PRIMITIVE_KINDS = frozenset({
    "boolean", "byte", "short", "int", "long", "char", "float", "double",
})

SEQUENCE_DEFAULT = "new java.util.ArrayList<>()"
SET_DEFAULT = "new java.util.HashSet<>()"


# =============================================================================
# Accessor Naming Constants
# =============================================================================

class AccessorKind(Enum):
    """Recognized accessor name prefixes."""

    GET = "get"
    SET = "set"
    HAS = "has"
    IS = "is"


REFLECTIVE_ACCESSOR = "getClass"

DEFAULT_BUILDER_SUFFIX = "Builder"
DEFAULT_FACTORY_METHOD = "create"
BUILD_METHOD_NAME = "build"
ADDER_PARAMETER_NAME = "item"
SETTER_PARAMETER_NAME = "obj"
BUILT_INSTANCE_NAME = "obj"

BUILDER_ANNOTATION = "BuilderPattern"
IGNORE_ANNOTATION = "BuilderPatternIgnore"
