"""Cross-document checks for all schemas declared on one page."""

import json
import logging
from typing import List, Optional, Sequence

from schemacheck.config import ValidationThresholds, default_thresholds
from schemacheck.constants import (
    CONFLICTING_TYPE_PAIRS,
    CONTENT_SPECIFIC_TYPES,
    FOUNDATIONAL_TYPES,
)
from schemacheck.document import JsonLdDocument
from schemacheck.models import FindingCollector, SchemaInput, ValidationResult

logger = logging.getLogger(__name__)


class RelationshipValidator:
    """Checks how the schemas on a page relate to each other.

    Works on declared type labels and raw text only, so it does not depend
    on the per-document results.
    """

    def __init__(self, thresholds: Optional[ValidationThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    def validate(self, documents: Sequence[SchemaInput]) -> ValidationResult:
        """Run every relationship check over a complete page.

        Args:
            documents: All documents declared on the page, in order

        Returns:
            ValidationResult holding only relationship findings
        """
        findings = FindingCollector()
        declared_types = [doc.type for doc in documents]

        self._check_conflicts(declared_types, findings)
        self._check_foundational(declared_types, findings)
        for doc in documents:
            self._check_document_completeness(doc, findings)
        self._check_type_count(declared_types, findings)

        return findings.freeze()

    def _check_conflicts(self, declared_types: List[str], findings: FindingCollector):
        for type1, type2 in CONFLICTING_TYPE_PAIRS:
            if type1 in declared_types and type2 in declared_types:
                findings.warning(
                    f"Potential conflict between {type1} and {type2} schemas",
                    suggestion=(
                        "These schema types may compete for rich snippet display. "
                        "Consider prioritizing the most relevant one."
                    ),
                )

    def _check_foundational(self, declared_types: List[str], findings: FindingCollector):
        if not any(t in declared_types for t in FOUNDATIONAL_TYPES):
            findings.note(
                "Consider adding Organization or WebSite schema",
                suggestion=(
                    "Organization schema helps establish site identity, "
                    "WebSite schema provides site-level metadata"
                ),
            )

    def _check_document_completeness(self, doc: SchemaInput, findings: FindingCollector):
        try:
            data = json.loads(doc.schema)
        except (ValueError, TypeError, RecursionError):
            # Already reported as invalid JSON by the per-document pipeline
            logger.debug(f"Skipping unparseable {doc.type} document in relationship checks")
            return

        if not isinstance(data, dict):
            logger.debug(f"Skipping non-object {doc.type} document in relationship checks")
            return
        document = JsonLdDocument(data)

        if doc.type == "Article":
            has_content = (
                document.has("headline")
                and document.has("description")
                and (document.has("author") or document.has("publisher"))
                and (document.has("datePublished") or document.has("dateModified"))
            )
            if not has_content:
                findings.warning(
                    "Article schema may be missing essential properties",
                    suggestion=(
                        "Ensure Article schema includes headline, description, "
                        "author/publisher, and publication dates"
                    ),
                )

        elif doc.type == "Product":
            if not any(document.has(p) for p in ("offers", "price", "availability")):
                findings.warning(
                    "Product schema may be missing commercial properties",
                    suggestion=(
                        "Include offers, price, or availability information "
                        "for better rich snippets"
                    ),
                )

        elif doc.type == "Organization":
            if not (document.has("address") and document.has("contactPoint")):
                findings.warning(
                    "Organization schema may be missing contact information",
                    suggestion="Include complete address and contact point for better local SEO",
                )

    def _check_type_count(self, declared_types: List[str], findings: FindingCollector):
        type_count = len(set(declared_types))

        if type_count > self.thresholds.max_schema_types:
            findings.warning(
                "High number of schema types detected",
                suggestion=(
                    f"Consider limiting to {self.thresholds.min_schema_types}-"
                    f"{self.thresholds.max_schema_types} relevant schemas per page "
                    "for optimal SEO performance"
                ),
            )
        elif type_count < self.thresholds.min_schema_types:
            findings.note(
                "Consider adding more schema types",
                suggestion="Multiple relevant schemas can enhance search engine understanding",
            )

    def recommendations(self, documents: Sequence[SchemaInput]) -> List[str]:
        """Advisory strings derived from which types co-occur on the page."""
        declared_types = [doc.type for doc in documents]
        recommendations = []

        if "Article" in declared_types and "WebSite" not in declared_types:
            recommendations.append("Add WebSite schema to establish site-level metadata")

        if "Product" in declared_types and "Organization" not in declared_types:
            recommendations.append("Add Organization schema to establish business identity")

        if "LocalBusiness" in declared_types and "Organization" not in declared_types:
            recommendations.append(
                "Consider adding Organization schema for business verification"
            )

        if ("FAQPage" in declared_types
                and len(declared_types) < self.thresholds.faq_min_schema_types):
            recommendations.append(
                "FAQ pages benefit from additional schemas like Article or WebSite"
            )

        if not any(t in declared_types for t in CONTENT_SPECIFIC_TYPES):
            recommendations.append(
                "Consider content-specific schemas like Article, Product, or Event"
            )

        return recommendations
