# tests/test_datatypes.py
"""Tests for the cross-cutting datatype checks."""

import pytest

from schemacheck.config import ValidationThresholds
from schemacheck.datatypes import DataTypeValidator
from schemacheck.document import JsonLdDocument
from schemacheck.models import FindingCollector


def _messages(findings):
    return [f.message for f in findings]


class TestDataTypeValidator:
    """Test suite for DataTypeValidator."""

    @pytest.fixture
    def validator(self):
        return DataTypeValidator()

    def _run(self, validator, data):
        findings = FindingCollector()
        validator.validate(JsonLdDocument(data), findings)
        return findings

    def test_clean_document(self, validator):
        findings = self._run(validator, {
            "@context": "https://schema.org",
            "url": "https://example.com",
            "logo": "https://example.com/logo.png",
            "email": "hello@example.com",
        })

        assert findings.errors == []
        assert findings.warnings == []

    def test_relative_urls_are_errors(self, validator):
        findings = self._run(validator, {"url": "/about", "mainEntityOfPage": "page.html"})

        assert _messages(findings.errors) == [
            "Invalid URL format for url",
            "Invalid URL format for mainEntityOfPage",
        ]
        assert findings.errors[0].path == "url"

    def test_url_lists_are_not_checked(self, validator):
        findings = self._run(validator, {"sameAs": ["twitter.com/acme", "not a url"]})

        assert findings.errors == []

    def test_invalid_email(self, validator):
        findings = self._run(validator, {"email": "hello at example dot com"})

        assert _messages(findings.errors) == ["Invalid email format"]

    def test_image_extension_warning(self, validator):
        findings = self._run(validator, {
            "image": "https://cdn.example.com/photo?id=3",
            "photo": "https://cdn.example.com/p.WEBP?w=300",
        })

        assert _messages(findings.warnings) == [
            "Image URL may not be a valid image format for image",
        ]

    def test_offer_formats(self, validator):
        findings = self._run(validator, {"offers": [
            {"price": "19.99", "priceCurrency": "USD", "availability": "InStock"},
            {"price": "19.999", "priceCurrency": "usd", "availability": "https://schema.org/InStock"},
            "not an offer",
            {"price": 25, "priceCurrency": "EUR"},
        ]})

        assert _messages(findings.errors) == [
            "Invalid price format in offers[1]",
            "Invalid currency code in offers[1]",
        ]
        assert _messages(findings.warnings) == ["Non-standard availability value in offers[1]"]
        assert findings.errors[1].path == "offers[1].priceCurrency"

    def test_single_offer_object_skips_offer_formats(self, validator):
        findings = self._run(validator, {"offers": {"price": "abc", "priceCurrency": "dollars"}})

        assert findings.errors == []

    @pytest.mark.parametrize("rating,expected", [
        ({"ratingValue": 4.5, "bestRating": 5}, []),
        ({"ratingValue": "4.5"}, []),
        ({"ratingValue": 7}, ["Rating value outside typical 1-5 range"]),
        ({"ratingValue": "0.5"}, ["Rating value outside typical 1-5 range"]),
        ({"ratingValue": 0}, []),
        ({"ratingValue": "0"}, ["Rating value outside typical 1-5 range"]),
        ({"ratingValue": "great"}, []),
        ({"ratingValue": 4, "bestRating": 10}, ["Best rating is not 5"]),
        ({"ratingValue": 4, "bestRating": "5"}, ["Best rating is not 5"]),
        ({"ratingValue": 4, "bestRating": 5.0}, []),
    ])
    def test_aggregate_rating(self, validator, rating, expected):
        findings = self._run(validator, {"aggregateRating": rating})

        assert _messages(findings.warnings) == expected

    def test_rating_thresholds(self):
        validator = DataTypeValidator(ValidationThresholds(rating_max=10, best_rating=10))

        findings = self._run(validator, {"aggregateRating": {"ratingValue": 8, "bestRating": 10}})

        assert findings.warnings == []

    @pytest.mark.parametrize("postal_code,warns", [
        ("12345", False),
        ("SW1A 1AA", False),
        ("K1A-0B1", False),
        ("12", True),
        ("12345678901", True),
        ("1234#", True),
    ])
    def test_postal_code(self, validator, postal_code, warns):
        findings = self._run(validator, {"address": {"postalCode": postal_code}})

        assert ("Postal code format may be invalid" in _messages(findings.warnings)) is warns

    def test_context_pattern(self, validator):
        assert self._run(validator, {"@context": "http://schema.org/"}).warnings == []

        findings = self._run(validator, {"@context": "https://example.org/vocab"})

        assert _messages(findings.warnings) == ["Non-standard @context value"]
        assert findings.warnings[0].path == "@context"

    def test_check_order(self, validator):
        findings = self._run(validator, {
            "@context": "https://example.org",
            "address": {"postalCode": "?"},
            "aggregateRating": {"ratingValue": 9},
            "image": "https://example.com/i",
        })

        assert _messages(findings.warnings) == [
            "Image URL may not be a valid image format for image",
            "Rating value outside typical 1-5 range",
            "Postal code format may be invalid",
            "Non-standard @context value",
        ]
