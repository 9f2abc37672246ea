# tests/test_output_manager.py
"""Tests for saving validation runs to disk."""

import json
from datetime import datetime

import pytest

from schemacheck.output_manager import DateTimeEncoder, OutputManager
from schemacheck.validator import SchemaValidator


@pytest.fixture
def report():
    return SchemaValidator().validate_page([
        {"type": "Organization", "schema": '{"@context":"https://schema.org","@type":"Organization","name":"Acme"}'},
        {"type": "Product/Variant", "schema": "{broken"},
    ])


class TestOutputManager:
    """Test suite for OutputManager."""

    @pytest.fixture
    def manager(self, tmp_path):
        return OutputManager(str(tmp_path / "reports"))

    def test_create_run_directory(self, manager, tmp_path):
        run_dir = manager.create_run_directory("home page", timestamp=datetime(2025, 11, 23, 14, 30, 22))

        assert run_dir == tmp_path / "reports" / "home_page" / "2025-11-23_143022"
        assert (run_dir / "documents").is_dir()

    @pytest.mark.parametrize("label,expected", [
        ("homepage", "homepage"),
        ("../etc/passwd", "etc_passwd"),
        ("...", "untitled"),
        ("", "untitled"),
    ])
    def test_safe_name(self, label, expected):
        assert OutputManager._safe_name(label) == expected

    def test_save_batch_report(self, manager, report):
        run_dir = manager.create_run_directory("homepage")

        manager.save_batch_report(run_dir, report)

        data = json.loads((run_dir / "report.json").read_text(encoding="utf-8"))
        assert "generated_at" in data
        assert len(data["documents"]) == 2
        assert data["errors"][0]["message"] == "Invalid JSON syntax"

        first = json.loads((run_dir / "documents" / "00_Organization.json").read_text(encoding="utf-8"))
        assert first["type"] == "Organization"
        assert first["validation"]["score"] == 70
        assert (run_dir / "documents" / "01_Product_Variant.json").exists()

        summary = (run_dir / "summary.txt").read_text(encoding="utf-8")
        assert "Documents: 2" in summary
        assert "[0] Organization: 70/100 (fair) - 6 warnings found." in summary
        assert "[1] Product/Variant: 80/100 (fair) - 1 error and 0 warnings found." in summary

    def test_latest_link(self, manager, report):
        first = manager.create_run_directory("homepage", timestamp=datetime(2025, 1, 1, 0, 0, 0))
        second = manager.create_run_directory("homepage", timestamp=datetime(2025, 1, 2, 0, 0, 0))

        manager.save_batch_report(first, report)
        manager.save_batch_report(second, report)

        latest = second.parent / "latest"
        if latest.is_symlink():
            assert latest.resolve() == second.resolve()
        else:
            assert (second.parent / "latest.txt").read_text() == second.name


class TestDateTimeEncoder:
    def test_encodes_datetime(self):
        encoded = json.dumps({"at": datetime(2025, 1, 2, 3, 4, 5)}, cls=DateTimeEncoder)

        assert encoded == '{"at": "2025-01-02T03:04:05"}'

    def test_rejects_other_objects(self):
        with pytest.raises(TypeError):
            json.dumps({"value": object()}, cls=DateTimeEncoder)
