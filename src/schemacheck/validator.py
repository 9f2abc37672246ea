"""
Schema.org JSON-LD Validator

Runs the validation pipeline over one or many documents:
- JSON parsing and structural checks (@context, @type, @id)
- Required/recommended properties per type
- Type-specific checks (Article, Product, Event, ...)
- Datatype formats (URLs, emails, prices, ratings)
- Content quality heuristics
- Page-level relationship checks and recommendations
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Mapping, Optional

from schemacheck.config import ValidationThresholds, default_thresholds, settings
from schemacheck.content_quality import ContentQualityValidator
from schemacheck.datatypes import DataTypeValidator
from schemacheck.models import (
    BatchReport,
    FindingCollector,
    SchemaInput,
    ValidatedDocument,
    ValidationResult,
)
from schemacheck.relationships import RelationshipValidator
from schemacheck.rules import SchemaRequirement, load_requirement_table
from schemacheck.structure import StructureValidator, parse_document
from schemacheck.type_checks import (
    SpecializedTypeValidator,
    TypeRequirementValidator,
    resolve_type,
)

logger = logging.getLogger(__name__)


class SchemaValidator:
    """Validate Schema.org JSON-LD documents and score them."""

    def __init__(
        self,
        requirements: Optional[Mapping[str, SchemaRequirement]] = None,
        thresholds: Optional[ValidationThresholds] = None,
    ):
        """Initialize the validator.

        Args:
            requirements: Requirement table; defaults to the packaged table
                (or ``SCHEMA_RULES_PATH`` when set)
            thresholds: Content and relationship thresholds
        """
        if requirements is None:
            requirements = load_requirement_table(settings.SCHEMA_RULES_PATH)
        self.thresholds = thresholds or default_thresholds

        self.structure = StructureValidator()
        self.type_requirements = TypeRequirementValidator(requirements)
        self.specialized = SpecializedTypeValidator(self.thresholds)
        self.datatypes = DataTypeValidator(self.thresholds)
        self.content = ContentQualityValidator(self.thresholds)
        self.relationships = RelationshipValidator(self.thresholds)

    def validate(self, declared_type: str, raw_text: str) -> ValidationResult:
        """
        Validate a single JSON-LD document.

        Args:
            declared_type: The type the document is expected to describe
            raw_text: JSON-LD text, possibly malformed

        Returns:
            ValidationResult with findings and score
        """
        findings = FindingCollector()

        document = parse_document(raw_text, findings)
        if document is not None:
            self.structure.validate(document, findings)
            self.type_requirements.validate(document, declared_type, findings)
            self.specialized.validate(document, resolve_type(document, declared_type), findings)
            self.datatypes.validate(document, findings)
            self.content.validate(document, declared_type, findings)

        result = findings.freeze()
        logger.debug(
            f"Validated {declared_type}: {len(result.errors)} errors, "
            f"{len(result.warnings)} warnings, {len(result.info)} info, score {result.score}"
        )
        return result

    def validate_document(self, item) -> ValidatedDocument:
        """Validate one ``{"type", "schema"}`` input and wrap the outcome."""
        doc = SchemaInput.coerce(item)
        return ValidatedDocument(
            declared_type=doc.type,
            raw_text=doc.schema,
            result=self.validate(doc.type, doc.schema),
        )

    def validate_many(
        self,
        documents: Iterable,
        max_workers: Optional[int] = None,
    ) -> List[ValidatedDocument]:
        """
        Validate several documents independently.

        Args:
            documents: ``SchemaInput`` objects, ``{"type", "schema"}`` dicts
                or ``(type, schema)`` pairs
            max_workers: Validate on a thread pool when greater than 1

        Returns:
            ValidatedDocument list in input order
        """
        inputs = [SchemaInput.coerce(item) for item in documents]

        if max_workers and max_workers > 1 and len(inputs) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                return list(executor.map(self.validate_document, inputs))

        return [self.validate_document(doc) for doc in inputs]

    def validate_page(
        self,
        documents: Iterable,
        max_workers: Optional[int] = None,
    ) -> BatchReport:
        """
        Validate every schema on a page and check how they relate.

        Args:
            documents: All documents for the page
            max_workers: Passed through to validate_many

        Returns:
            BatchReport with flattened findings and recommendations
        """
        inputs = [SchemaInput.coerce(item) for item in documents]
        validated = self.validate_many(inputs, max_workers=max_workers)

        collector = FindingCollector()
        for doc in validated:
            collector.extend(doc.result)

        # Relationship checks need the complete page
        page_result = self.relationships.validate(inputs)
        collector.extend(page_result)

        report = BatchReport(
            errors=list(collector.errors),
            warnings=list(collector.warnings),
            info=list(collector.info),
            recommendations=self.relationships.recommendations(inputs),
            documents=validated,
            page_findings=list(page_result.findings),
        )
        logger.debug(
            f"Validated {len(validated)} schemas: {len(report.errors)} errors, "
            f"{len(report.warnings)} warnings, {len(report.recommendations)} recommendations"
        )
        return report


_default_validator: Optional[SchemaValidator] = None


def _get_default_validator() -> SchemaValidator:
    global _default_validator
    if _default_validator is None:
        _default_validator = SchemaValidator()
    return _default_validator


def validate_schema(declared_type: str, raw_text: str) -> ValidationResult:
    """Validate one document with the default rule table and thresholds."""
    return _get_default_validator().validate(declared_type, raw_text)


def validate_schemas(documents: Iterable) -> List[ValidatedDocument]:
    """Validate several documents with the default validator."""
    return _get_default_validator().validate_many(documents)


def validate_schemas_for_seo(documents: Iterable) -> BatchReport:
    """Validate a page's documents and run relationship checks."""
    return _get_default_validator().validate_page(documents)
