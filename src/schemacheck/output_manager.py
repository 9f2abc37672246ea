"""Output manager for saving validation runs with timestamps."""

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from schemacheck.display import get_score_band, get_validation_summary
from schemacheck.models import BatchReport

logger = logging.getLogger(__name__)


class DateTimeEncoder(json.JSONEncoder):
    """JSON encoder that handles datetime objects."""

    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


class OutputManager:
    """Manages organized output of validation runs."""

    def __init__(self, base_output_dir: str = "reports"):
        """Initialize output manager.

        Args:
            base_output_dir: Base directory for all validation outputs
        """
        self.base_output_dir = Path(base_output_dir)
        self.base_output_dir.mkdir(parents=True, exist_ok=True)

    def create_run_directory(self, label: str, timestamp: Optional[datetime] = None) -> Path:
        """Create a timestamped directory for one validation run.

        Args:
            label: Name for the page or input file being validated
            timestamp: Optional timestamp (defaults to now)

        Returns:
            Path to the created directory

        Example structure:
            reports/
            └── homepage/
                ├── 2025-11-23_143022/
                │   ├── report.json
                │   ├── summary.txt
                │   └── documents/
                │       ├── 00_Organization.json
                │       └── 01_WebSite.json
                └── latest -> 2025-11-23_143022
        """
        if timestamp is None:
            timestamp = datetime.now()

        timestamp_str = timestamp.strftime("%Y-%m-%d_%H%M%S")

        run_dir = self.base_output_dir / self._safe_name(label) / timestamp_str
        run_dir.mkdir(parents=True, exist_ok=True)
        (run_dir / "documents").mkdir(exist_ok=True)

        return run_dir

    def save_batch_report(self, run_dir: Path, report: BatchReport) -> None:
        """Save a page report, one file per document, and a text summary.

        Args:
            run_dir: Directory created by create_run_directory
            report: The page's BatchReport
        """
        data = report.to_dict()
        data["generated_at"] = datetime.now()
        self._save_json(run_dir / "report.json", data)

        documents_dir = run_dir / "documents"
        for index, doc in enumerate(report.documents):
            filename = f"{index:02d}_{self._safe_name(doc.declared_type)}.json"
            self._save_json(documents_dir / filename, doc.to_dict())

        self._save_summary(run_dir / "summary.txt", report)
        self._create_latest_link(run_dir)
        logger.info(f"Saved validation report to {run_dir}")

    def _save_json(self, filepath: Path, data: dict) -> None:
        """Save data as formatted JSON.

        Args:
            filepath: Path to save to
            data: Data to save
        """
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False, cls=DateTimeEncoder)

    def _save_summary(self, filepath: Path, report: BatchReport) -> None:
        with open(filepath, "w", encoding="utf-8") as f:
            f.write("=" * 60 + "\n")
            f.write("STRUCTURED DATA VALIDATION SUMMARY\n")
            f.write("=" * 60 + "\n\n")

            f.write(f"Generated at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write(f"Documents: {len(report.documents)}\n")
            f.write(f"Errors: {len(report.errors)}\n")
            f.write(f"Warnings: {len(report.warnings)}\n")
            f.write(f"Info: {len(report.info)}\n\n")

            for index, doc in enumerate(report.documents):
                score = doc.result.score
                f.write(
                    f"[{index}] {doc.declared_type}: {score}/100 "
                    f"({get_score_band(score).value}) - {get_validation_summary(doc.result)}\n"
                )

            if report.recommendations:
                f.write("\nRecommendations:\n")
                for rec in report.recommendations:
                    f.write(f"  • {rec}\n")

    def _create_latest_link(self, run_dir: Path) -> None:
        """Create/update 'latest' symlink to this run.

        Args:
            run_dir: Directory for this run
        """
        latest_link = run_dir.parent / "latest"

        if latest_link.exists() or latest_link.is_symlink():
            latest_link.unlink()

        try:
            latest_link.symlink_to(run_dir.name)
        except (OSError, NotImplementedError):
            # Symlinks might not work on all systems (Windows)
            with open(run_dir.parent / "latest.txt", "w") as f:
                f.write(str(run_dir.name))

    @staticmethod
    def _safe_name(value: str) -> str:
        """Make a label safe to use as a file or directory name."""
        cleaned = re.sub(r"[^A-Za-z0-9._-]+", "_", value).strip("._")
        return cleaned or "untitled"
