"""Type-requirement and per-type specialized validation."""

import logging
from typing import Callable, Dict, Mapping, Optional

from schemacheck.config import ValidationThresholds, default_thresholds
from schemacheck.constants import DATE_FORMAT_SUGGESTION
from schemacheck.document import JsonLdDocument, is_present
from schemacheck.models import FindingCollector
from schemacheck.rules import SchemaRequirement, SchemaType, matches

logger = logging.getLogger(__name__)


def resolve_type(document: JsonLdDocument, expected_type: str) -> str:
    """The document's own @type, falling back to the expected type."""
    return document.primary_type or expected_type


class TypeRequirementValidator:
    """Checks required and recommended properties against the rule table."""

    def __init__(self, requirements: Mapping[str, SchemaRequirement]):
        self.requirements = requirements

    def lookup(self, document: JsonLdDocument, expected_type: str) -> Optional[SchemaRequirement]:
        """Find the table entry: document @type first, then the expected type."""
        own_type = document.primary_type
        if own_type in self.requirements:
            return self.requirements[own_type]
        return self.requirements.get(expected_type)

    def validate(
        self,
        document: JsonLdDocument,
        expected_type: str,
        findings: FindingCollector,
    ) -> None:
        own_types = document.types
        if own_types and expected_type not in own_types:
            got = own_types[0] if len(own_types) == 1 else ", ".join(own_types)
            findings.warning(
                f'Schema type mismatch: expected "{expected_type}", got "{got}"',
                suggestion="Ensure the @type matches the intended schema type",
            )

        requirement = self.lookup(document, expected_type)
        if requirement is None:
            logger.debug(f"No requirement entry for {own_types or expected_type!r}")
            return

        for prop in requirement.required:
            if not document.has(prop):
                findings.error(
                    f"Missing required property: {prop}",
                    path=prop,
                    suggestion=f'Add "{prop}" property to your schema',
                )

        for prop in requirement.recommended:
            if not document.has(prop):
                findings.warning(
                    f"Missing recommended property: {prop}",
                    path=prop,
                    suggestion=f'Consider adding "{prop}" for better SEO',
                )


class SpecializedTypeValidator:
    """Checks properties whose meaning is specific to one schema type."""

    def __init__(self, thresholds: Optional[ValidationThresholds] = None):
        self.thresholds = thresholds or default_thresholds
        self._handlers: Dict[SchemaType, Callable[[JsonLdDocument, FindingCollector], None]] = {
            SchemaType.ARTICLE: self._validate_article,
            SchemaType.PRODUCT: self._validate_product,
            SchemaType.ORGANIZATION: self._validate_organization,
            SchemaType.EVENT: self._validate_event,
            SchemaType.BREADCRUMB_LIST: self._validate_breadcrumb_list,
            SchemaType.FAQ_PAGE: self._validate_faq_page,
            SchemaType.HOW_TO: self._validate_how_to,
            SchemaType.REVIEW: self._validate_review,
            SchemaType.LOCAL_BUSINESS: self._validate_local_business,
        }

    def validate(
        self,
        document: JsonLdDocument,
        schema_type: str,
        findings: FindingCollector,
    ) -> None:
        known = SchemaType.parse(schema_type)
        handler = self._handlers.get(known) if known else None
        if handler is None:
            # Person, WebSite and unknown types have no specialized checks
            return
        handler(document, findings)

    def _check_date(self, document: JsonLdDocument, prop: str, findings: FindingCollector):
        value = document.get(prop)
        if is_present(value) and not matches('date', value):
            findings.error(
                f"Invalid {prop} format",
                path=prop,
                suggestion=DATE_FORMAT_SUGGESTION,
            )

    def _validate_article(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate Article schema."""
        headline = document.string("headline")
        if headline and len(headline) > self.thresholds.headline_max_length:
            findings.warning(
                "Headline is too long",
                path="headline",
                suggestion=(
                    f"Keep headlines under {self.thresholds.headline_max_length} "
                    "characters for better SEO"
                ),
            )

        if document.string("author"):
            findings.warning(
                "Author should be an object with name property",
                path="author",
                suggestion='Use {"@type": "Person", "name": "Author Name"} format',
            )

        self._check_date(document, "datePublished", findings)
        self._check_date(document, "dateModified", findings)

    def _validate_product(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate Product schema."""
        offers = document.get("offers")
        if is_present(offers) and not self._offers_have_price(offers):
            findings.warning(
                "Product offers should include price",
                path="offers.price",
                suggestion='Add "price" property to offers for better rich snippets',
            )

        image = document.string("image")
        if image and not matches('url', image):
            findings.error(
                "Invalid image URL format",
                path="image",
                suggestion="Use a valid HTTP/HTTPS URL for the image",
            )

    @staticmethod
    def _offers_have_price(offers) -> bool:
        # Only a single Offer object carries a top-level price; lists never do
        return isinstance(offers, dict) and is_present(offers.get("price"))

    def _validate_organization(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate Organization schema."""
        logo = document.string("logo")
        if logo and not matches('url', logo):
            findings.error(
                "Invalid logo URL format",
                path="logo",
                suggestion="Use a valid HTTP/HTTPS URL for the logo",
            )

        telephone = document.lookup("contactPoint.telephone")
        if is_present(telephone) and not matches('phone', telephone):
            findings.warning(
                "Invalid phone number format",
                path="contactPoint.telephone",
                suggestion="Use international format: +1234567890",
            )

    def _validate_event(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate Event schema."""
        self._check_date(document, "startDate", findings)
        self._check_date(document, "endDate", findings)

    def _validate_breadcrumb_list(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate BreadcrumbList schema."""
        items = document.get("itemListElement")
        if not isinstance(items, list):
            return

        for i, item in enumerate(items):
            if not (isinstance(item, dict) and is_present(item.get("name"))):
                findings.error(
                    f"Breadcrumb item {i + 1} missing name",
                    path=f"itemListElement[{i}].name",
                    suggestion='Add "name" property to each breadcrumb item',
                )

    def _validate_faq_page(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate FAQPage schema."""
        entries = document.get("mainEntity")
        if not isinstance(entries, list):
            return

        for i, faq in enumerate(entries):
            faq = faq if isinstance(faq, dict) else {}
            if not is_present(faq.get("question")):
                findings.error(
                    f"FAQ {i + 1} missing question",
                    path=f"mainEntity[{i}].question",
                    suggestion='Add "question" property to each FAQ item',
                )
            if not is_present(faq.get("answer")):
                findings.error(
                    f"FAQ {i + 1} missing answer",
                    path=f"mainEntity[{i}].answer",
                    suggestion='Add "answer" property to each FAQ item',
                )

    def _validate_how_to(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate HowTo schema."""
        steps = document.get("step")
        if not isinstance(steps, list):
            return

        for i, step in enumerate(steps):
            if not (isinstance(step, dict) and is_present(step.get("name"))):
                findings.error(
                    f"HowTo step {i + 1} missing name",
                    path=f"step[{i}].name",
                    suggestion='Add "name" property to each step',
                )

    def _validate_review(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate Review schema."""
        rating = document.get("reviewRating")
        if not is_present(rating):
            return

        rating = rating if isinstance(rating, dict) else {}
        if not (is_present(rating.get("ratingValue")) and is_present(rating.get("bestRating"))):
            findings.error(
                "Review rating missing required properties",
                path="reviewRating",
                suggestion='Add "ratingValue" and "bestRating" to reviewRating',
            )

    def _validate_local_business(self, document: JsonLdDocument, findings: FindingCollector):
        """Validate LocalBusiness schema."""
        address = document.get("address")
        if not is_present(address):
            return

        address = address if isinstance(address, dict) else {}
        if not (is_present(address.get("streetAddress"))
                and is_present(address.get("addressLocality"))):
            findings.warning(
                "Address missing recommended properties",
                path="address",
                suggestion='Add "streetAddress" and "addressLocality" to address',
            )
