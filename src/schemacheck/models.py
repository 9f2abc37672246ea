"""Data models for JSON-LD validation results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from schemacheck.constants import (
    ERROR_PENALTY,
    WARNING_PENALTY,
    INFO_PENALTY,
    MAX_SCORE,
    MIN_SCORE,
)


class Severity(str, Enum):
    """Severity of a single validation finding."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationStatus(str, Enum):
    """Overall status of a validated document, used for colour/icon mapping."""

    VALID = "valid"
    VALID_WITH_WARNINGS = "valid-with-warnings"
    INVALID = "invalid"


class ScoreBand(str, Enum):
    """Coarse bucket for a 0-100 validation score."""

    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


# ============================================================================
# Findings
# ============================================================================

@dataclass(frozen=True)
class Finding:
    """One issue detected by a validator."""

    severity: Severity
    message: str
    path: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"type": self.severity.value, "message": self.message}
        if self.path is not None:
            data["path"] = self.path
        if self.suggestion is not None:
            data["suggestion"] = self.suggestion
        return data


def calculate_score(error_count: int, warning_count: int, info_count: int) -> int:
    """Weighted quality score, clamped to 0-100."""
    score = MAX_SCORE
    score -= error_count * ERROR_PENALTY
    score -= warning_count * WARNING_PENALTY
    score -= info_count * INFO_PENALTY
    return max(MIN_SCORE, min(MAX_SCORE, score))


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single JSON-LD document."""

    errors: tuple = ()
    warnings: tuple = ()
    info: tuple = ()

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def score(self) -> int:
        return calculate_score(len(self.errors), len(self.warnings), len(self.info))

    @property
    def findings(self) -> tuple:
        """All findings, errors first, then warnings, then info."""
        return self.errors + self.warnings + self.info

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "errors": [f.to_dict() for f in self.errors],
            "warnings": [f.to_dict() for f in self.warnings],
            "info": [f.to_dict() for f in self.info],
            "score": self.score,
        }


class FindingCollector:
    """Mutable accumulator the validators append to.

    A collector is created per validation call and frozen into a
    ValidationResult once every check has run.
    """

    def __init__(self):
        self.errors: list[Finding] = []
        self.warnings: list[Finding] = []
        self.info: list[Finding] = []

    def error(self, message: str, path: Optional[str] = None,
              suggestion: Optional[str] = None) -> None:
        self.errors.append(Finding(Severity.ERROR, message, path, suggestion))

    def warning(self, message: str, path: Optional[str] = None,
                suggestion: Optional[str] = None) -> None:
        self.warnings.append(Finding(Severity.WARNING, message, path, suggestion))

    def note(self, message: str, path: Optional[str] = None,
             suggestion: Optional[str] = None) -> None:
        """Record an Info finding."""
        self.info.append(Finding(Severity.INFO, message, path, suggestion))

    def extend(self, result: ValidationResult) -> None:
        """Append every finding of an already-built result."""
        self.errors.extend(result.errors)
        self.warnings.extend(result.warnings)
        self.info.extend(result.info)

    def freeze(self) -> ValidationResult:
        return ValidationResult(
            errors=tuple(self.errors),
            warnings=tuple(self.warnings),
            info=tuple(self.info),
        )


# ============================================================================
# Documents and batch reports
# ============================================================================

@dataclass(frozen=True)
class SchemaInput:
    """A raw document as supplied by the generation/storage collaborator."""

    type: str
    schema: str

    @classmethod
    def coerce(cls, item) -> "SchemaInput":
        """Accept a SchemaInput, a ``{"type", "schema"}`` mapping or a pair."""
        if isinstance(item, cls):
            return item
        if isinstance(item, dict):
            return cls(type=item["type"], schema=item["schema"])
        declared_type, schema = item
        return cls(type=declared_type, schema=schema)


@dataclass(frozen=True)
class ValidatedDocument:
    """An input document together with its validation outcome."""

    declared_type: str
    raw_text: str
    result: ValidationResult

    def to_dict(self) -> dict:
        return {
            "type": self.declared_type,
            "schema": self.raw_text,
            "validation": self.result.to_dict(),
        }


@dataclass
class BatchReport:
    """Consolidated findings for all documents on one page."""

    errors: list = field(default_factory=list)
    warnings: list = field(default_factory=list)
    info: list = field(default_factory=list)
    recommendations: list = field(default_factory=list)

    # Per-document results, in input order
    documents: list = field(default_factory=list)

    # Findings from the cross-document relationship checks only
    page_findings: list = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def to_dict(self) -> dict:
        return {
            "errors": [f.to_dict() for f in self.errors],
            "warnings": [f.to_dict() for f in self.warnings],
            "info": [f.to_dict() for f in self.info],
            "recommendations": list(self.recommendations),
            "documents": [d.to_dict() for d in self.documents],
            "pageFindings": [f.to_dict() for f in self.page_findings],
        }
