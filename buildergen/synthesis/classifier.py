"""
Member classification.

Getter accessors are split into three ordered mappings (accessor name ->
declared type): collections, primitives and references. The category
decides the backing field's default value and whether an adder method is
generated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..model import AccessorDescriptor, MemberCategory, MemberDescriptor
from ..utils.constants import (
    EMPTY_STRING_LITERAL,
    NULL_LITERAL,
    PRIMITIVE_KINDS,
    SEQUENCE_DEFAULT,
    SEQUENCE_TYPES,
    SET_DEFAULT,
    SET_TYPES,
    STRING_TYPES,
)
from ..utils.logging import get_logger
from ..utils.naming import element_type_of, field_name_for, is_getter_name, raw_type

logger = get_logger(__name__)


@dataclass
class ClassificationResult:
    """Three disjoint, insertion-ordered mappings of accessor name -> declared type."""

    collections: Dict[str, str] = field(default_factory=dict)
    primitives: Dict[str, str] = field(default_factory=dict)
    references: Dict[str, str] = field(default_factory=dict)

    def by_category(self, category: MemberCategory) -> Dict[str, str]:
        if category is MemberCategory.COLLECTION:
            return self.collections
        if category is MemberCategory.PRIMITIVE:
            return self.primitives
        return self.references

    def merged(self) -> Dict[str, str]:
        """All members: collections, then primitives, then references."""
        merged: Dict[str, str] = {}
        for mapping in (self.collections, self.primitives, self.references):
            merged.update(mapping)
        return merged

    def __len__(self) -> int:
        return len(self.collections) + len(self.primitives) + len(self.references)


class MemberClassifier:
    """
    Classify getters into collection, primitive and reference members.

    Collection detection wins over the other two. The container type sets
    are instance attributes so a host can register further container
    names.
    """

    def __init__(self):
        self.sequence_types = set(SEQUENCE_TYPES)
        self.set_types = set(SET_TYPES)
        self.string_types = set(STRING_TYPES)

    @staticmethod
    def is_candidate(accessor: AccessorDescriptor) -> bool:
        """A ``get``-prefixed, parameterless, non-ignored accessor other than getClass."""
        return (
            is_getter_name(accessor.name)
            and accessor.parameter_count == 0
            and accessor.return_type is not None
            and not accessor.is_ignored
        )

    def is_sequence(self, type_name: str) -> bool:
        return raw_type(type_name) in self.sequence_types

    def is_set(self, type_name: str) -> bool:
        return raw_type(type_name) in self.set_types

    def category_of(self, type_name: str) -> MemberCategory:
        if self.is_sequence(type_name) or self.is_set(type_name):
            return MemberCategory.COLLECTION
        if type_name in PRIMITIVE_KINDS:
            return MemberCategory.PRIMITIVE
        return MemberCategory.REFERENCE

    def classify(self, accessors: Iterable[AccessorDescriptor]) -> ClassificationResult:
        result = ClassificationResult()
        for accessor in accessors:
            if not self.is_candidate(accessor):
                continue
            category = self.category_of(accessor.return_type)
            result.by_category(category)[accessor.name] = accessor.return_type

        logger.debug(
            f"Classified {len(result)} members: collections={len(result.collections)}, "
            f"primitives={len(result.primitives)}, references={len(result.references)}"
        )
        return result

    def default_value_for(self, type_name: str, category: MemberCategory) -> Optional[str]:
        """
        Initializer literal for a backing field.

        Sequences get an empty ArrayList, sets an empty HashSet, strings
        ``""`` and other references ``null``. Primitives get none and keep
        their natural zero value.
        """
        if category is MemberCategory.COLLECTION:
            if self.is_sequence(type_name):
                return SEQUENCE_DEFAULT
            return SET_DEFAULT
        if category is MemberCategory.PRIMITIVE:
            return None
        if raw_type(type_name) in self.string_types:
            return EMPTY_STRING_LITERAL
        return NULL_LITERAL

    def describe(self, accessor_name: str, type_name: str, category: MemberCategory) -> MemberDescriptor:
        element = element_type_of(type_name) if category is MemberCategory.COLLECTION else None
        return MemberDescriptor(
            accessor_name=accessor_name,
            field_name=field_name_for(accessor_name),
            declared_type=type_name,
            category=category,
            element_type=element,
            default_value=self.default_value_for(type_name, category),
        )

    def members(self, result: ClassificationResult) -> List[MemberDescriptor]:
        """Member descriptors in emission order: collections, primitives, references."""
        described: List[MemberDescriptor] = []
        for category in MemberCategory:
            for name, type_name in result.by_category(category).items():
                described.append(self.describe(name, type_name, category))
        return described
