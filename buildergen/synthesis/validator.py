"""
Precondition checks run before a builder is synthesized.

A type qualifies when it has a no-argument constructor (the generated
``build()`` calls it) and is POJO-shaped: its getters are paired with
single-argument setters.
"""

from __future__ import annotations

from typing import List, Optional

from ..model import AccessorDescriptor, Diagnostic, DiagnosticKind, TypeDescriptor
from ..utils.constants import AccessorKind
from ..utils.logging import get_logger
from ..utils.naming import accessor_suffix, is_getter_name, is_setter_name

logger = get_logger(__name__)

_POJO_GETTER_KINDS = (AccessorKind.GET, AccessorKind.HAS, AccessorKind.IS)


class PreconditionValidator:
    """
    Validate source types.

    In the default lenient mode the POJO check passes when every getter is
    matched, or when the matched count equals the setter count. Strict mode
    requires both.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def check_no_arg_constructor(self, type_desc: TypeDescriptor) -> Optional[Diagnostic]:
        if type_desc.has_no_arg_constructor():
            return None
        return Diagnostic(
            DiagnosticKind.MISSING_CONSTRUCTOR,
            "Missing no argument constructor",
            type_desc.qualified_name,
        )

    @staticmethod
    def getters_of(type_desc: TypeDescriptor) -> List[AccessorDescriptor]:
        return [a for a in type_desc.accessors() if is_getter_name(a.name, _POJO_GETTER_KINDS)]

    @staticmethod
    def setters_of(type_desc: TypeDescriptor) -> List[AccessorDescriptor]:
        return [a for a in type_desc.accessors() if is_setter_name(a.name)]

    @staticmethod
    def count_matched(getters: List[AccessorDescriptor], setters: List[AccessorDescriptor]) -> int:
        """Count getters with exactly one same-suffix setter taking exactly one parameter."""
        matched = 0
        for getter in getters:
            suffix = accessor_suffix(getter.name)
            candidates = [
                s for s in setters
                if accessor_suffix(s.name) == suffix and s.parameter_count == 1
            ]
            if len(candidates) == 1:
                matched += 1
        return matched

    def check_is_pojo_shaped(self, type_desc: TypeDescriptor) -> Optional[Diagnostic]:
        getters = self.getters_of(type_desc)
        setters = self.setters_of(type_desc)
        matched = self.count_matched(getters, setters)

        covers_getters = matched == len(getters)
        covers_setters = matched == len(setters)
        ok = (covers_getters and covers_setters) if self.strict else (covers_getters or covers_setters)

        logger.debug(
            f"POJO check for {type_desc.qualified_name}: getters={len(getters)}, "
            f"setters={len(setters)}, matched={matched}, strict={self.strict}"
        )
        if ok:
            return None
        return Diagnostic(
            DiagnosticKind.NOT_A_POJO,
            f"Class {type_desc.qualified_name} is not POJO.",
            type_desc.qualified_name,
        )

    def validate(self, type_desc: TypeDescriptor, require_constructor: bool = True) -> List[Diagnostic]:
        """Run every check and return all diagnostics; an empty list means the type qualifies."""
        diagnostics: List[Diagnostic] = []
        if require_constructor:
            missing = self.check_no_arg_constructor(type_desc)
            if missing is not None:
                diagnostics.append(missing)
        shape = self.check_is_pojo_shaped(type_desc)
        if shape is not None:
            diagnostics.append(shape)
        return diagnostics
