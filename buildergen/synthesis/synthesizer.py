"""
Builder synthesis.

Drives the Emitter, MethodComposer and MemberClassifier to turn one
validated TypeDescriptor into the source text of ``<Name>Builder``:

- one private field per member, defaulted by category
- ``add<Item>(item)`` for each collection with a known element type
- ``set<Name>(obj)`` for every member
- ``build()`` constructing and populating the source type
- a static factory returning a fresh builder
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..codegen import Emitter, MethodComposer
from ..model import MemberCategory, MemberDescriptor, TypeDescriptor
from ..utils.config import GenerationConfig
from ..utils.constants import (
    ADDER_PARAMETER_NAME,
    BUILD_METHOD_NAME,
    BUILT_INSTANCE_NAME,
    SETTER_PARAMETER_NAME,
    Visibility,
)
from ..utils.logging import get_logger
from ..utils.naming import adder_name_for, qualify, setter_name_for
from .classifier import MemberClassifier

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedSource:
    """Rendered builder text and the name it should be stored under."""

    qualified_name: str
    simple_name: str
    package: Optional[str]
    text: str


class BuilderSynthesizer:
    """
    Produce builder source for validated types.

    Each call to ``synthesize`` uses a fresh Emitter and fresh composers,
    so repeated runs over the same descriptor give identical text.
    """

    def __init__(self, config: Optional[GenerationConfig] = None, classifier: Optional[MemberClassifier] = None):
        self.config = config or GenerationConfig()
        self.classifier = classifier or MemberClassifier()

    def builder_name(self, type_desc: TypeDescriptor) -> str:
        return type_desc.simple_name + self.config.builder_suffix

    def builder_qualified_name(self, type_desc: TypeDescriptor) -> str:
        return qualify(type_desc.enclosing_package, self.builder_name(type_desc))

    def collect_members(self, type_desc: TypeDescriptor) -> List[MemberDescriptor]:
        """
        Classify the type's getters and key the result by field name.

        When two accessors derive the same field name the later one
        replaces the earlier one in place.
        """
        result = self.classifier.classify(type_desc.accessors())
        by_field: Dict[str, MemberDescriptor] = {}
        for member in self.classifier.members(result):
            if member.field_name in by_field:
                logger.debug(
                    f"Field '{member.field_name}' of {type_desc.qualified_name} redefined by {member.accessor_name}"
                )
            by_field[member.field_name] = member
        return list(by_field.values())

    def synthesize(self, type_desc: TypeDescriptor) -> str:
        return self.generate(type_desc).text

    def generate(self, type_desc: TypeDescriptor) -> GeneratedSource:
        builder_name = self.builder_name(type_desc)
        builder_type = self.builder_qualified_name(type_desc)
        source_type = type_desc.qualified_name
        members = self.collect_members(type_desc)

        emitter = Emitter(self.config.line_separator, self.config.indent)
        emitter.define_package(type_desc.enclosing_package)
        emitter.define_class(Visibility.PUBLIC, builder_name)

        for member in members:
            emitter.add_field(Visibility.PRIVATE, member.declared_type, member.field_name, member.default_value)

        for method in self._adders(members, builder_type):
            emitter.add_method(method)
        for method in self._setters(members, builder_type):
            emitter.add_method(method)
        emitter.add_method(self._build_method(members, source_type))
        emitter.add_method(self._factory_method(builder_type))

        text = emitter.render()
        logger.debug(f"Synthesized {builder_type}: {len(members)} members")
        return GeneratedSource(builder_type, builder_name, type_desc.enclosing_package or None, text)

    # ------------------------------------------------------------------
    # Method shapes
    # ------------------------------------------------------------------

    def _adders(self, members: List[MemberDescriptor], builder_type: str) -> List[MethodComposer]:
        adders = []
        for member in members:
            if member.category is not MemberCategory.COLLECTION:
                continue
            if member.element_type is None:
                logger.debug(f"No element type for {member.accessor_name}, skipping adder")
                continue
            adders.append(
                MethodComposer(adder_name_for(member.accessor_name))
                .set_visibility(Visibility.PUBLIC)
                .set_return_type(builder_type)
                .add_parameter(member.element_type, ADDER_PARAMETER_NAME)
                .add_body_line(f"this.{member.field_name}.add({ADDER_PARAMETER_NAME});")
                .add_body_line("return this;")
            )
        return adders

    def _setters(self, members: List[MemberDescriptor], builder_type: str) -> List[MethodComposer]:
        return [
            MethodComposer(setter_name_for(member.accessor_name))
            .set_visibility(Visibility.PUBLIC)
            .set_return_type(builder_type)
            .add_parameter(member.declared_type, SETTER_PARAMETER_NAME)
            .add_body_line(f"this.{member.field_name} = {SETTER_PARAMETER_NAME};")
            .add_body_line("return this;")
            for member in members
        ]

    def _build_method(self, members: List[MemberDescriptor], source_type: str) -> MethodComposer:
        build = (
            MethodComposer(BUILD_METHOD_NAME)
            .set_visibility(Visibility.PUBLIC)
            .set_return_type(source_type)
            .add_body_line(f"{source_type} {BUILT_INSTANCE_NAME} = new {source_type}();")
        )
        for member in members:
            build.add_body_line(
                f"{BUILT_INSTANCE_NAME}.{setter_name_for(member.accessor_name)}({member.field_name});"
            )
        build.add_body_line(f"return {BUILT_INSTANCE_NAME};")
        return build

    def _factory_method(self, builder_type: str) -> MethodComposer:
        return (
            MethodComposer(self.config.factory_method_name)
            .set_visibility(Visibility.PUBLIC)
            .set_static()
            .set_return_type(builder_type)
            .add_body_line(f"return new {builder_type}();")
        )
