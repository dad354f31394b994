"""
Synthesis package for BuilderGen.

Validation, member classification and builder synthesis for one source
type at a time.
"""

from .classifier import ClassificationResult, MemberClassifier
from .synthesizer import BuilderSynthesizer, GeneratedSource
from .validator import PreconditionValidator

__all__ = [
    "ClassificationResult",
    "MemberClassifier",
    "BuilderSynthesizer",
    "GeneratedSource",
    "PreconditionValidator",
]
