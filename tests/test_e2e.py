# tests/test_e2e.py
"""End-to-end tests for validating a whole page of structured data."""

import json

import pytest

from schemacheck import validate_schemas_for_seo
from schemacheck.output_manager import OutputManager
from schemacheck.report_generator import ReportGenerator


@pytest.fixture
def perfect_organization():
    """Organization schema that passes every per-document check."""
    return {
        "@context": "https://schema.org",
        "@type": "Organization",
        "@id": "https://example.com/#org",
        "name": "Example Corp",
        "url": "https://example.com",
        "logo": "https://example.com/logo.png",
        "description": "Example Corp builds reliable tools for structured data teams around the world.",
        "address": {
            "@type": "PostalAddress",
            "streetAddress": "1 Main Street",
            "addressLocality": "Springfield",
            "postalCode": "12345",
        },
        "contactPoint": {"@type": "ContactPoint", "telephone": "+15555550100"},
    }


@pytest.fixture
def perfect_website():
    """WebSite schema that passes every per-document check."""
    return {
        "@context": "https://schema.org",
        "@type": "WebSite",
        "@id": "https://example.com/#website",
        "name": "Example Corp",
        "url": "https://example.com",
        "description": "The official website of Example Corp with product news, guides and support.",
        "potentialAction": {
            "@type": "SearchAction",
            "target": "https://example.com/search?q={query}",
            "query-input": "required name=query",
        },
    }


@pytest.fixture
def perfect_article():
    """Article schema that passes every per-document check."""
    return {
        "@context": "https://schema.org",
        "@type": "Article",
        "@id": "https://example.com/blog/release#article",
        "headline": "Example Corp ships version two of its validator",
        "author": {"@type": "Person", "name": "Jordan Lee"},
        "datePublished": "2024-01-15",
        "dateModified": "2024-01-16T09:30:00Z",
        "publisher": {"@id": "https://example.com/#org"},
        "description": "Version two adds page-level checks, faster batch runs and clearer report output.",
        "image": "https://example.com/images/release.jpg",
    }


@pytest.fixture
def sample_page(perfect_organization, perfect_website, perfect_article):
    """A page with three clean schemas and one broken one."""
    return [
        {"type": "Organization", "schema": json.dumps(perfect_organization)},
        {"type": "WebSite", "schema": json.dumps(perfect_website)},
        {"type": "Article", "schema": json.dumps(perfect_article)},
        {"type": "FAQPage", "schema": '{"@context": "https://schema.org", "@type": "FAQPage",'},
    ]


class TestPageValidation:
    """Validate complete pages from raw text to report."""

    def test_perfect_documents_score_100(self, perfect_organization, perfect_website, perfect_article):
        report = validate_schemas_for_seo([
            {"type": "Organization", "schema": json.dumps(perfect_organization)},
            {"type": "WebSite", "schema": json.dumps(perfect_website)},
            {"type": "Article", "schema": json.dumps(perfect_article)},
        ])

        for doc in report.documents:
            assert doc.result.findings == (), doc.declared_type
            assert doc.result.score == 100

        assert report.errors == []
        assert report.warnings == []
        assert report.info == []
        assert report.recommendations == []

    def test_foundational_page_only_gets_content_recommendation(self, perfect_organization, perfect_website):
        report = validate_schemas_for_seo([
            ("Organization", json.dumps(perfect_organization)),
            ("WebSite", json.dumps(perfect_website)),
        ])

        assert report.is_valid
        assert report.page_findings == []
        assert report.recommendations == [
            "Consider content-specific schemas like Article, Product, or Event",
        ]

    def test_mixed_page(self, sample_page):
        report = validate_schemas_for_seo(sample_page)

        assert [doc.declared_type for doc in report.documents] == [
            "Organization", "WebSite", "Article", "FAQPage",
        ]
        assert report.documents[3].result.score == 80
        assert [f.message for f in report.errors] == ["Invalid JSON syntax"]
        assert [f.message for f in report.page_findings] == [
            "Potential conflict between FAQPage and Article schemas",
        ]
        # Per-document findings come before page-level findings
        assert report.warnings[-1].message == "Potential conflict between FAQPage and Article schemas"
        assert not report.is_valid

    def test_report_serializes(self, sample_page):
        data = validate_schemas_for_seo(sample_page).to_dict()

        encoded = json.loads(json.dumps(data))
        assert encoded["documents"][3]["validation"]["isValid"] is False
        assert encoded["documents"][0]["validation"]["score"] == 100
        assert encoded["pageFindings"][0]["type"] == "warning"

    def test_page_to_saved_reports(self, sample_page, tmp_path):
        report = validate_schemas_for_seo(sample_page)

        manager = OutputManager(str(tmp_path / "reports"))
        run_dir = manager.create_run_directory("homepage")
        manager.save_batch_report(run_dir, report)
        ReportGenerator().generate_report(report, run_dir / "report.md", fmt="markdown", title="Homepage")

        assert (run_dir / "report.json").exists()
        assert (run_dir / "documents" / "03_FAQPage.json").exists()
        assert (run_dir / "report.md").read_text(encoding="utf-8").startswith("# Homepage")
