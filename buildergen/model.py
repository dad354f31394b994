"""
Data model for builder synthesis.

Source types arrive as TypeDescriptors, whether built by hand, by the Java
source reader or by another host. Synthesis reports problems as Diagnostic
records rather than exceptions so that one bad type never stops a round.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .utils.constants import PRIMITIVE_KINDS
from .utils.naming import qualify


@dataclass(frozen=True)
class AccessorDescriptor:
    """A method exposed by a source type, e.g. ``getAge(): int``."""

    name: str
    return_type: Optional[str] = None
    parameter_types: Tuple[str, ...] = ()
    is_ignored: bool = False

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_types)

    @property
    def signature(self) -> Tuple[str, Tuple[str, ...]]:
        """Name plus parameter types; overriding declarations share it."""
        return (self.name, self.parameter_types)

    @property
    def returns_primitive(self) -> bool:
        return self.return_type in PRIMITIVE_KINDS


@dataclass(frozen=True)
class ConstructorDescriptor:
    """A declared constructor, identified by its parameter types."""

    parameter_types: Tuple[str, ...] = ()


@dataclass
class TypeDescriptor:
    """
    A source type as seen by the synthesizer.

    ``accessors()`` returns own declarations first, then inherited ones
    from ``superclass``; a subclass declaration hides a superclass one
    with the same signature.
    """

    simple_name: str
    enclosing_package: Optional[str] = None
    declared_accessors: List[AccessorDescriptor] = field(default_factory=list)
    constructors: List[ConstructorDescriptor] = field(default_factory=list)
    superclass: Optional["TypeDescriptor"] = None
    annotations: Tuple[str, ...] = ()

    @property
    def qualified_name(self) -> str:
        return qualify(self.enclosing_package, self.simple_name)

    def accessors(self) -> List[AccessorDescriptor]:
        seen = set()
        visited = set()
        result: List[AccessorDescriptor] = []
        current: Optional[TypeDescriptor] = self
        while current is not None and id(current) not in visited:
            visited.add(id(current))
            for accessor in current.declared_accessors:
                if accessor.signature in seen:
                    continue
                seen.add(accessor.signature)
                result.append(accessor)
            current = current.superclass
        return result

    def has_no_arg_constructor(self) -> bool:
        return any(not ctor.parameter_types for ctor in self.constructors)

    def is_annotated_with(self, annotation: str) -> bool:
        return annotation in self.annotations or any(a.endswith("." + annotation) for a in self.annotations)


class MemberCategory(Enum):
    """How a builder member is stored and defaulted."""

    COLLECTION = "collection"
    PRIMITIVE = "primitive"
    REFERENCE = "reference"


@dataclass(frozen=True)
class MemberDescriptor:
    """A classified getter and everything derived from it."""

    accessor_name: str
    field_name: str
    declared_type: str
    category: MemberCategory
    element_type: Optional[str] = None
    default_value: Optional[str] = None


class DiagnosticKind(Enum):
    """Kinds of problems reported to the host."""

    MISSING_CONSTRUCTOR = "MissingConstructor"
    NOT_A_POJO = "NotAPojo"
    INVALID_LITERAL = "InvalidLiteral"
    SINK_WRITE_FAILURE = "SinkWriteFailure"
    SOURCE_PARSE_FAILURE = "SourceParseFailure"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    subject_type: Optional[str] = None

    def __str__(self) -> str:
        if self.subject_type:
            return f"[{self.kind.value}] {self.subject_type}: {self.message}"
        return f"[{self.kind.value}] {self.message}"

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "subject_type": self.subject_type,
        }
