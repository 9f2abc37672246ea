"""Summary strings and status classification for validation results."""

from schemacheck.constants import (
    FAIR_SCORE_THRESHOLD,
    GOOD_SCORE_THRESHOLD,
    STATUS_ICONS,
)
from schemacheck.models import ScoreBand, ValidationResult, ValidationStatus


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def get_validation_status(result: ValidationResult) -> ValidationStatus:
    """Classify a result as valid, valid with warnings, or invalid.

    Info findings never change the status.
    """
    if not result.is_valid:
        return ValidationStatus.INVALID
    if result.warnings:
        return ValidationStatus.VALID_WITH_WARNINGS
    return ValidationStatus.VALID


def get_validation_summary(result: ValidationResult) -> str:
    """One-line human summary, e.g. "2 errors and 3 warnings found."."""
    status = get_validation_status(result)
    if status is ValidationStatus.VALID:
        return "Perfect! All validations passed."
    if status is ValidationStatus.VALID_WITH_WARNINGS:
        return f"{_plural(len(result.warnings), 'warning')} found."
    return (
        f"{_plural(len(result.errors), 'error')} and "
        f"{_plural(len(result.warnings), 'warning')} found."
    )


def get_status_icon(result: ValidationResult) -> str:
    return STATUS_ICONS[get_validation_status(result).value]


def get_score_band(score: int) -> ScoreBand:
    if score >= GOOD_SCORE_THRESHOLD:
        return ScoreBand.GOOD
    if score >= FAIR_SCORE_THRESHOLD:
        return ScoreBand.FAIR
    return ScoreBand.POOR
