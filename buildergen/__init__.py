"""
BuilderGen: fluent builder generation for Java POJOs.

BuilderGen inspects a data-holder type's accessors and synthesizes the
source of a companion ``<Name>Builder`` class with chainable setters,
collection adders, a ``build()`` method and a static factory.

Usage:
    from buildergen import BuilderSynthesizer, TypeDescriptor, AccessorDescriptor

    person = TypeDescriptor(
        "Person", "org.example",
        declared_accessors=[AccessorDescriptor("getName", "String")],
        constructors=[ConstructorDescriptor()],
    )
    print(BuilderSynthesizer().synthesize(person))
"""

__version__ = "0.1.0"
__author__ = "BuilderGen Team"
__email__ = "buildergen@example.com"

# Public API exports
from .model import (
    AccessorDescriptor,
    ConstructorDescriptor,
    TypeDescriptor,
    MemberCategory,
    MemberDescriptor,
    Diagnostic,
    DiagnosticKind,
)
from .codegen import Emitter, MethodComposer
from .synthesis import (
    BuilderSynthesizer,
    GeneratedSource,
    MemberClassifier,
    PreconditionValidator,
)
from .processor import BuilderProcessor, RoundResult
from .sink import FileSink, MemorySink, SourceSink
from .utils.constants import Visibility
from .utils.exceptions import BuilderGenError, InvalidLiteralError
from .utils.config import BuilderGenConfig, get_config

__all__ = [
    "AccessorDescriptor",
    "ConstructorDescriptor",
    "TypeDescriptor",
    "MemberCategory",
    "MemberDescriptor",
    "Diagnostic",
    "DiagnosticKind",
    "Emitter",
    "MethodComposer",
    "BuilderSynthesizer",
    "GeneratedSource",
    "MemberClassifier",
    "PreconditionValidator",
    "BuilderProcessor",
    "RoundResult",
    "FileSink",
    "MemorySink",
    "SourceSink",
    "Visibility",
    "BuilderGenError",
    "InvalidLiteralError",
    "BuilderGenConfig",
    "get_config",
]
