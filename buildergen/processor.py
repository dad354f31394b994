"""
Round processing.

A BuilderProcessor takes the annotated types of one round and, for each of
them independently, validates, synthesizes and writes the builder. Failures
become diagnostics; one type's failure never stops the others.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .model import Diagnostic, DiagnosticKind, TypeDescriptor
from .sink import MemorySink, SourceSink
from .synthesis import BuilderSynthesizer, PreconditionValidator
from .utils.config import BuilderGenConfig, get_config
from .utils.constants import BUILDER_ANNOTATION
from .utils.exceptions import InvalidLiteralError, SinkWriteError
from .utils.logging import BuilderGenLogger


@dataclass
class RoundResult:
    """Outcome of one processing round."""

    generated: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def failed_types(self) -> List[str]:
        seen: List[str] = []
        for diag in self.diagnostics:
            if diag.subject_type and diag.subject_type not in seen:
                seen.append(diag.subject_type)
        return seen

    def merge(self, other: "RoundResult") -> None:
        self.generated.extend(other.generated)
        self.diagnostics.extend(other.diagnostics)


class BuilderProcessor:
    """
    Validate-then-synthesize driver for annotated types.

    Args:
        sink: Where generated sources go; defaults to a MemorySink
        config: Configuration; defaults to the global configuration
    """

    def __init__(self, sink: Optional[SourceSink] = None, config: Optional[BuilderGenConfig] = None):
        self.config = config or get_config()
        self.sink = sink if sink is not None else MemorySink()
        self.log = BuilderGenLogger(__name__)

    @staticmethod
    def select_annotated(types: Iterable[TypeDescriptor], annotation: str = BUILDER_ANNOTATION) -> List[TypeDescriptor]:
        return [t for t in types if t.is_annotated_with(annotation)]

    def process_type(self, type_desc: TypeDescriptor) -> RoundResult:
        """Validate, synthesize and write one type."""
        result = RoundResult()
        name = type_desc.qualified_name

        validator = PreconditionValidator(strict=self.config.validation.strict_pojo_check)
        diagnostics = validator.validate(
            type_desc, require_constructor=self.config.validation.require_no_arg_constructor
        )
        if diagnostics:
            self._report(result, diagnostics)
            self.log.log_skipped(name, ", ".join(d.kind.value for d in diagnostics))
            return result

        self.log.log_synthesis_start(name, len(type_desc.accessors()))
        synthesizer = BuilderSynthesizer(self.config.generation)
        try:
            generated = synthesizer.generate(type_desc)
        except InvalidLiteralError as e:
            self._report(result, [Diagnostic(DiagnosticKind.INVALID_LITERAL, str(e), name)])
            return result

        try:
            self.sink.write(generated.qualified_name, generated.text)
        except SinkWriteError as e:
            self._report(result, [Diagnostic(DiagnosticKind.SINK_WRITE_FAILURE, str(e), name)])
            return result

        self.log.log_written(generated.qualified_name, len(generated.text))
        result.generated.append(generated.qualified_name)
        return result

    def process_round(self, types: Iterable[TypeDescriptor]) -> RoundResult:
        """Process every type; the result collects all generated names and diagnostics."""
        round_result = RoundResult()
        for type_desc in types:
            round_result.merge(self.process_type(type_desc))
        self.log.log_round_summary(len(round_result.generated), len(round_result.failed_types()))
        return round_result

    def _report(self, result: RoundResult, diagnostics: List[Diagnostic]) -> None:
        for diag in diagnostics:
            self.log.log_diagnostic(diag)
            result.diagnostics.append(diag)
