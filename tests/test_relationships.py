# tests/test_relationships.py
"""Tests for page-level relationship checks and recommendations."""

import json

import pytest

from schemacheck.config import ValidationThresholds
from schemacheck.models import SchemaInput
from schemacheck.relationships import RelationshipValidator


def _doc(declared_type, data=None):
    if data is None:
        data = {"@context": "https://schema.org", "@type": declared_type}
    text = data if isinstance(data, str) else json.dumps(data)
    return SchemaInput(type=declared_type, schema=text)


def _messages(findings):
    return [f.message for f in findings]


COMPLETE_ORGANIZATION = {
    "@type": "Organization",
    "name": "Acme",
    "address": {"streetAddress": "1 Main St"},
    "contactPoint": {"telephone": "+15555550100"},
}

COMPLETE_ARTICLE = {
    "@type": "Article",
    "headline": "Release notes",
    "description": "What changed in this release.",
    "author": {"name": "Ada"},
    "datePublished": "2024-01-15",
}


class TestRelationshipValidator:
    """Test suite for RelationshipValidator.validate."""

    @pytest.fixture
    def validator(self):
        return RelationshipValidator()

    def test_faq_and_article_conflict(self, validator):
        result = validator.validate([
            _doc("Article", COMPLETE_ARTICLE),
            _doc("FAQPage"),
            _doc("WebSite"),
        ])

        assert _messages(result.warnings) == [
            "Potential conflict between FAQPage and Article schemas",
        ]

    def test_conflicts_follow_pair_order(self, validator):
        result = validator.validate([
            _doc("Article", COMPLETE_ARTICLE),
            _doc("Event"),
            _doc("Review"),
            _doc("WebSite"),
        ])

        assert _messages(result.warnings) == [
            "Potential conflict between Event and Article schemas",
            "Potential conflict between Review and Article schemas",
        ]

    def test_missing_foundational_types(self, validator):
        result = validator.validate([_doc("Person"), _doc("Event")])

        assert "Consider adding Organization or WebSite schema" in _messages(result.info)

    def test_foundational_type_present(self, validator):
        result = validator.validate([_doc("WebSite"), _doc("Person")])

        assert result.info == ()
        assert result.warnings == ()

    def test_incomplete_article(self, validator):
        article = dict(COMPLETE_ARTICLE)
        del article["datePublished"]

        result = validator.validate([_doc("Article", article), _doc("WebSite")])

        assert _messages(result.warnings) == ["Article schema may be missing essential properties"]

    def test_complete_article(self, validator):
        result = validator.validate([_doc("Article", COMPLETE_ARTICLE), _doc("WebSite")])

        assert result.warnings == ()

    def test_product_without_commercial_properties(self, validator):
        result = validator.validate([_doc("Product", {"name": "Shoe"}), _doc("Organization", COMPLETE_ORGANIZATION)])

        assert _messages(result.warnings) == ["Product schema may be missing commercial properties"]

    def test_product_with_price(self, validator):
        result = validator.validate([_doc("Product", {"price": "5"}), _doc("Organization", COMPLETE_ORGANIZATION)])

        assert result.warnings == ()

    def test_organization_without_contact(self, validator):
        result = validator.validate([_doc("Organization", {"name": "Acme"}), _doc("WebSite")])

        assert _messages(result.warnings) == ["Organization schema may be missing contact information"]

    def test_unparseable_documents_are_skipped(self, validator):
        result = validator.validate([_doc("Organization", "{oops"), _doc("WebSite")])

        assert result.errors == ()
        assert result.warnings == ()

    @pytest.mark.parametrize("text", ["null", "[]", '"Acme"', "42"])
    def test_non_object_documents_are_skipped(self, validator, text):
        """Completeness checks only apply to JSON objects."""
        result = validator.validate([
            _doc("Organization", text),
            _doc("Article", text),
            _doc("WebSite"),
        ])

        assert result.warnings == ()

    def test_single_type_suggests_more(self, validator):
        result = validator.validate([_doc("WebSite")])

        assert _messages(result.info) == ["Consider adding more schema types"]

    def test_duplicate_declarations_count_once(self, validator):
        result = validator.validate([_doc("WebSite"), _doc("WebSite")])

        assert _messages(result.info) == ["Consider adding more schema types"]

    def test_too_many_types(self, validator):
        types = ["Organization", "WebSite", "Person", "Event", "HowTo", "Recipe", "Place",
                 "Book", "Movie", "Course", "JobPosting"]

        result = validator.validate([_doc(t) for t in types])

        assert "High number of schema types detected" in _messages(result.warnings)

    def test_type_count_thresholds(self):
        validator = RelationshipValidator(ValidationThresholds(max_schema_types=1))

        result = validator.validate([_doc("WebSite"), _doc("Person")])

        assert _messages(result.warnings) == ["High number of schema types detected"]

    def test_empty_page(self, validator):
        result = validator.validate([])

        assert _messages(result.info) == [
            "Consider adding Organization or WebSite schema",
            "Consider adding more schema types",
        ]


class TestRecommendations:
    """Test suite for RelationshipValidator.recommendations."""

    @pytest.fixture
    def validator(self):
        return RelationshipValidator()

    def test_article_without_website(self, validator):
        recommendations = validator.recommendations([_doc("Article")])

        assert recommendations == ["Add WebSite schema to establish site-level metadata"]

    def test_product_without_organization(self, validator):
        recommendations = validator.recommendations([_doc("Product"), _doc("WebSite")])

        assert recommendations == ["Add Organization schema to establish business identity"]

    def test_local_business_without_organization(self, validator):
        recommendations = validator.recommendations([_doc("LocalBusiness"), _doc("Article"), _doc("WebSite")])

        assert recommendations == ["Consider adding Organization schema for business verification"]

    def test_small_faq_page(self, validator):
        recommendations = validator.recommendations([_doc("FAQPage"), _doc("WebSite")])

        assert recommendations == ["FAQ pages benefit from additional schemas like Article or WebSite"]

    def test_faq_count_includes_duplicates(self, validator):
        recommendations = validator.recommendations([_doc("FAQPage"), _doc("WebSite"), _doc("WebSite")])

        assert recommendations == []

    def test_no_content_types(self, validator):
        recommendations = validator.recommendations([_doc("Organization"), _doc("WebSite")])

        assert recommendations == ["Consider content-specific schemas like Article, Product, or Event"]
