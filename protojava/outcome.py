"""
Result values returned by the generator driver.

A run either succeeds, carrying the ordered lists of generated and annotation
files, or fails with a single `GenerationError` describing what went wrong.
"""

import dataclasses
from enum import Enum, unique
from typing import List, Optional


@unique
class ErrorKind(Enum):
    """Which phase of a run failed."""
    CONFIGURATION = "configuration"   # Unknown option or conflicting options
    VALIDATION    = "validation"      # A variant rejected the schema
    GENERATION    = "generation"      # Emission or sibling generation failed


@dataclasses.dataclass(frozen=True)
class GenerationError:
    kind:    ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclasses.dataclass
class VariantResult:
    """Files produced by one variant."""
    primary:     str
    siblings:    List[str] = dataclasses.field(default_factory=list)
    annotations: List[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class GenerationOutcome:
    success:          bool
    error:            Optional[GenerationError] = None
    generated_files:  List[str] = dataclasses.field(default_factory=list)
    annotation_files: List[str] = dataclasses.field(default_factory=list)
    results:          List[VariantResult] = dataclasses.field(default_factory=list)

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    @staticmethod
    def failure(kind: ErrorKind, message: str, generated_files: List[str] = None,
                annotation_files: List[str] = None) -> "GenerationOutcome":
        return GenerationOutcome(
            success=False,
            error=GenerationError(kind, message),
            generated_files=list(generated_files or []),
            annotation_files=list(annotation_files or []),
        )

    def __bool__(self) -> bool:
        return self.success
