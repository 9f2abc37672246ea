"""Content quality checks - empty values, lengths, placeholders, keyword stuffing."""

from collections import Counter
from typing import Optional

from schemacheck.config import ValidationThresholds, default_thresholds
from schemacheck.constants import PLACEHOLDER_PHRASES
from schemacheck.document import JsonLdDocument
from schemacheck.models import FindingCollector
from schemacheck.rules import SchemaType


class ContentQualityValidator:
    """Heuristic checks on the text content of a JSON-LD document."""

    # Import constants as class attributes for easy overriding in subclasses
    PLACEHOLDER_PHRASES = PLACEHOLDER_PHRASES

    def __init__(self, thresholds: Optional[ValidationThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    def validate(
        self,
        document: JsonLdDocument,
        declared_type: str,
        findings: FindingCollector,
    ) -> None:
        """Run every content check.

        Args:
            document: Parsed document
            declared_type: The caller's type label (not the document's @type)
            findings: Collector to append to
        """
        self._check_empty_values(document, findings)
        self._check_description_length(document, findings)
        self._check_name_length(document, findings)
        if declared_type == SchemaType.ARTICLE.value:
            self._check_headline_length(document, findings)
        self._check_duplicate_name(document, findings)
        self._check_placeholders(document, findings)
        self._check_very_short_description(document, findings)
        self._check_keyword_stuffing(document, findings)

    def _check_empty_values(self, document: JsonLdDocument, findings: FindingCollector):
        for key, value in document.string_items():
            if value.strip() == "":
                findings.warning(
                    f"Empty value for property: {key}",
                    path=key,
                    suggestion="Provide meaningful content for better SEO",
                )

    def _check_description_length(self, document: JsonLdDocument, findings: FindingCollector):
        description = document.string("description")
        if not description:
            return

        length = len(description)
        if length < self.thresholds.description_min_length:
            findings.warning(
                "Description is too short",
                path="description",
                suggestion=(
                    f"Write descriptions with at least {self.thresholds.description_min_length} "
                    "characters for better SEO"
                ),
            )
        elif length > self.thresholds.description_max_length:
            findings.warning(
                "Description is too long",
                path="description",
                suggestion=(
                    f"Keep descriptions under {self.thresholds.description_max_length} "
                    "characters for better display"
                ),
            )

    def _check_name_length(self, document: JsonLdDocument, findings: FindingCollector):
        name = document.string("name")
        if name and len(name) > self.thresholds.name_max_length:
            findings.warning(
                "Name is very long",
                path="name",
                suggestion=(
                    f"Keep names under {self.thresholds.name_max_length} "
                    "characters for better display"
                ),
            )

    def _check_headline_length(self, document: JsonLdDocument, findings: FindingCollector):
        headline = document.string("headline")
        if headline and len(headline) > self.thresholds.headline_max_length:
            findings.warning(
                "Headline is too long for optimal SEO",
                path="headline",
                suggestion=(
                    f"Keep headlines under {self.thresholds.headline_max_length} "
                    "characters for better search display"
                ),
            )

    def _check_duplicate_name(self, document: JsonLdDocument, findings: FindingCollector):
        name = document.string("name")
        headline = document.string("headline")
        if name and headline and name == headline:
            findings.note(
                "Name and headline are identical",
                suggestion="Consider using different values for name and headline",
            )

    def _check_placeholders(self, document: JsonLdDocument, findings: FindingCollector):
        for key, value in document.string_items():
            text = value.lower()
            if any(phrase in text for phrase in self.PLACEHOLDER_PHRASES):
                findings.warning(
                    f"Generic placeholder content detected in {key}",
                    path=key,
                    suggestion="Replace placeholder content with actual meaningful content",
                )

    def _check_very_short_description(self, document: JsonLdDocument, findings: FindingCollector):
        description = document.string("description")
        if description and len(description) < self.thresholds.description_very_short_length:
            findings.warning(
                "Description may be too short",
                path="description",
                suggestion="Provide more detailed description for better SEO",
            )

    def _check_keyword_stuffing(self, document: JsonLdDocument, findings: FindingCollector):
        description = document.string("description")
        if not description:
            return

        words = [
            word for word in description.lower().split()
            if len(word) > self.thresholds.keyword_min_length
        ]
        counts = Counter(words)
        if any(count > self.thresholds.keyword_repeat_limit for count in counts.values()):
            findings.warning(
                "Potential keyword stuffing detected",
                path="description",
                suggestion="Avoid repeating the same words too frequently in descriptions",
            )
