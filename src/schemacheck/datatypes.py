"""Cross-cutting datatype validation applied to every document."""

import math
from typing import Optional

from schemacheck.config import ValidationThresholds, default_thresholds
from schemacheck.constants import (
    IMAGE_PROPERTIES,
    OFFER_AVAILABILITY_VALUES,
    URL_PROPERTIES,
)
from schemacheck.document import JsonLdDocument, is_present
from schemacheck.models import FindingCollector
from schemacheck.rules import matches


def _as_number(value) -> Optional[float]:
    """Numeric value of a rating field, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


class DataTypeValidator:
    """Validates URL, email, image, offer, rating and address formats."""

    def __init__(self, thresholds: Optional[ValidationThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    def validate(self, document: JsonLdDocument, findings: FindingCollector) -> None:
        self._validate_urls(document, findings)
        self._validate_email(document, findings)
        self._validate_images(document, findings)
        self._validate_offers(document, findings)
        self._validate_rating(document, findings)
        self._validate_postal_code(document, findings)
        self._validate_context(document, findings)

    def _validate_urls(self, document: JsonLdDocument, findings: FindingCollector):
        for prop in URL_PROPERTIES:
            value = document.string(prop)
            if value and not matches('url', value):
                findings.error(
                    f"Invalid URL format for {prop}",
                    path=prop,
                    suggestion="Use a valid HTTP/HTTPS URL",
                )

    def _validate_email(self, document: JsonLdDocument, findings: FindingCollector):
        email = document.get("email")
        if is_present(email) and not matches('email', email):
            findings.error(
                "Invalid email format",
                path="email",
                suggestion="Use a valid email address format",
            )

    def _validate_images(self, document: JsonLdDocument, findings: FindingCollector):
        for prop in IMAGE_PROPERTIES:
            value = document.string(prop)
            if value and not matches('imageUrl', value):
                findings.warning(
                    f"Image URL may not be a valid image format for {prop}",
                    path=prop,
                    suggestion="Use JPG, PNG, GIF, WebP, or SVG image formats",
                )

    def _validate_offers(self, document: JsonLdDocument, findings: FindingCollector):
        offers = document.get("offers")
        if not isinstance(offers, list):
            return

        for index, offer in enumerate(offers):
            if not isinstance(offer, dict):
                continue

            price = offer.get("price")
            if is_present(price) and not matches('price', price):
                findings.error(
                    f"Invalid price format in offers[{index}]",
                    path=f"offers[{index}].price",
                    suggestion="Use numeric format like 19.99",
                )

            currency = offer.get("priceCurrency")
            if is_present(currency) and not matches('currency', currency):
                findings.error(
                    f"Invalid currency code in offers[{index}]",
                    path=f"offers[{index}].priceCurrency",
                    suggestion="Use 3-letter ISO 4217 currency code like USD, EUR, GBP",
                )

            availability = offer.get("availability")
            if is_present(availability) and availability not in OFFER_AVAILABILITY_VALUES:
                findings.warning(
                    f"Non-standard availability value in offers[{index}]",
                    path=f"offers[{index}].availability",
                    suggestion="Use standard Schema.org availability values",
                )

    def _validate_rating(self, document: JsonLdDocument, findings: FindingCollector):
        rating = document.get("aggregateRating")
        if not isinstance(rating, dict):
            return

        raw_value = rating.get("ratingValue")
        rating_value = _as_number(raw_value)
        # Presence is judged on the raw value: 0 is absent, "0" is not
        if is_present(raw_value) and rating_value is not None and not (
            self.thresholds.rating_min <= rating_value <= self.thresholds.rating_max
        ):
            findings.warning(
                "Rating value outside typical 1-5 range",
                path="aggregateRating.ratingValue",
                suggestion="Use values between 1 and 5 for better compatibility",
            )

        best_rating = rating.get("bestRating")
        if is_present(best_rating) and (
            isinstance(best_rating, bool) or best_rating != self.thresholds.best_rating
        ):
            findings.warning(
                "Best rating is not 5",
                path="aggregateRating.bestRating",
                suggestion="Use 5 as the best rating for standard 5-star systems",
            )

    def _validate_postal_code(self, document: JsonLdDocument, findings: FindingCollector):
        postal_code = document.lookup("address.postalCode")
        if is_present(postal_code) and not matches('postalCode', postal_code):
            findings.warning(
                "Postal code format may be invalid",
                path="address.postalCode",
                suggestion="Check postal code format for the specific country",
            )

    def _validate_context(self, document: JsonLdDocument, findings: FindingCollector):
        context = document.get("@context")
        if is_present(context) and not matches('schemaContext', context):
            findings.warning(
                "Non-standard @context value",
                path="@context",
                suggestion='Use "https://schema.org" for better compatibility',
            )
