"""Schema.org JSON-LD validation and quality scoring."""

__version__ = "0.1.0"

from schemacheck.validator import (
    SchemaValidator,
    validate_schema,
    validate_schemas,
    validate_schemas_for_seo,
)
from schemacheck.models import (
    Severity,
    Finding,
    ValidationResult,
    ValidatedDocument,
    SchemaInput,
    BatchReport,
    ValidationStatus,
    ScoreBand,
)
from schemacheck.display import (
    get_validation_summary,
    get_validation_status,
    get_status_icon,
    get_score_band,
)
from schemacheck.rules import SchemaType, SchemaRequirement, load_requirement_table
from schemacheck.config import ValidationThresholds, settings
from schemacheck.exceptions import SchemaCheckError, RuleTableError, InputFormatError

__all__ = [
    # Core
    "SchemaValidator",
    "validate_schema",
    "validate_schemas",
    "validate_schemas_for_seo",
    # Models
    "Severity",
    "Finding",
    "ValidationResult",
    "ValidatedDocument",
    "SchemaInput",
    "BatchReport",
    "ValidationStatus",
    "ScoreBand",
    # Display
    "get_validation_summary",
    "get_validation_status",
    "get_status_icon",
    "get_score_band",
    # Rules and configuration
    "SchemaType",
    "SchemaRequirement",
    "load_requirement_table",
    "ValidationThresholds",
    "settings",
    # Errors
    "SchemaCheckError",
    "RuleTableError",
    "InputFormatError",
]
