"""
Naming Utilities for BuilderGen.

This module provides accessor-name parsing and the identifier derivations
used when generating builders: field names, adder and setter suffixes, and
helpers for taking generic Java type strings apart.
"""

from __future__ import annotations

from typing import Optional, List, NamedTuple

from .constants import AccessorKind, REFLECTIVE_ACCESSOR


# =============================================================================
# Accessor Name Parsing
# =============================================================================

class AccessorName(NamedTuple):
    """A parsed accessor name such as ``getAge`` -> (GET, "Age")."""

    kind: AccessorKind
    suffix: str


_PREFIX_ORDER = (AccessorKind.GET, AccessorKind.SET, AccessorKind.HAS, AccessorKind.IS)


def parse_accessor_name(name: str) -> Optional[AccessorName]:
    """
    Split an accessor name into its prefix kind and suffix.

    The suffix must be non-empty and start with an upper-case letter, so
    ``get``, ``getter`` and ``is_valid`` are not accessors.

    Returns:
        The parsed name, or None when ``name`` is not accessor-shaped
    """
    for kind in _PREFIX_ORDER:
        prefix = kind.value
        if not name.startswith(prefix):
            continue
        suffix = name[len(prefix):]
        if suffix and suffix[0].isalpha() and suffix[0].isupper():
            return AccessorName(kind, suffix)
    return None


def is_getter_name(name: str, kinds=(AccessorKind.GET,)) -> bool:
    """Check whether ``name`` is a getter of one of ``kinds``, excluding getClass."""
    if is_reflective_accessor(name):
        return False
    parsed = parse_accessor_name(name)
    return parsed is not None and parsed.kind in kinds


def is_setter_name(name: str) -> bool:
    """Check whether ``name`` is setter-shaped (``set`` + upper-case letter)."""
    parsed = parse_accessor_name(name)
    return parsed is not None and parsed.kind is AccessorKind.SET


def is_reflective_accessor(name: str) -> bool:
    """Check for the universal ``getClass`` accessor and names starting with it."""
    return name.startswith(REFLECTIVE_ACCESSOR)


def accessor_suffix(name: str) -> str:
    """Return the suffix of an accessor name, or the name itself if not an accessor."""
    parsed = parse_accessor_name(name)
    return parsed.suffix if parsed else name


# =============================================================================
# Identifier Derivation
# =============================================================================

def decapitalize(name: str) -> str:
    """Lower-case the first character of ``name``."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def field_name_for(accessor: str) -> str:
    """Derive a backing field name: ``getFirstName`` -> ``firstName``."""
    return decapitalize(accessor_suffix(accessor))


def singularize(suffix: str) -> str:
    """Drop one trailing plural ``s``: ``Tags`` -> ``Tag``; ``Data`` stays."""
    if len(suffix) > 1 and suffix.endswith("s"):
        return suffix[:-1]
    return suffix


def adder_name_for(accessor: str) -> str:
    """``getTags`` -> ``addTag``."""
    return "add" + singularize(accessor_suffix(accessor))


def setter_name_for(accessor: str) -> str:
    """``getName`` -> ``setName``; ``isActive`` -> ``setActive``."""
    return "set" + accessor_suffix(accessor)


def qualify(package: Optional[str], simple_name: str) -> str:
    """Join a package and simple name; an absent or empty package yields the simple name."""
    if not package:
        return simple_name
    return f"{package}.{simple_name}"


# =============================================================================
# Generic Type Strings
# =============================================================================

def raw_type(type_name: str) -> str:
    """Strip generic arguments: ``java.util.List<String>`` -> ``java.util.List``."""
    cut = type_name.find("<")
    if cut == -1:
        return type_name.strip()
    return type_name[:cut].strip()


def split_type_arguments(type_name: str) -> List[str]:
    """
    Return the top-level generic arguments of ``type_name``.

    Nested arguments are kept intact, so ``Map<String, List<Integer>>``
    gives ``["String", "List<Integer>"]``. A type with no argument list
    gives an empty list.
    """
    start = type_name.find("<")
    end = type_name.rfind(">")
    if start == -1 or end <= start:
        return []

    inner = type_name[start + 1:end]
    args: List[str] = []
    depth = 0
    current = ""
    for ch in inner:
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
        if ch == "," and depth == 0:
            args.append(current.strip())
            current = ""
            continue
        current += ch
    if current.strip():
        args.append(current.strip())
    return args


def element_type_of(type_name: str) -> Optional[str]:
    """
    Return the type an ``add`` call on the container accepts.

    A lower-bounded wildcard accepts its bound (``? super Item`` ->
    ``Item``). An upper-bounded or unbounded wildcard accepts nothing, and
    a missing argument list or more than one argument resolve to None too.
    """
    args = split_type_arguments(type_name)
    if len(args) != 1:
        return None
    arg = args[0]
    if arg.startswith("?"):
        bound = arg[1:].strip()
        if bound.startswith("super "):
            return bound[len("super "):].strip() or None
        return None
    return arg
