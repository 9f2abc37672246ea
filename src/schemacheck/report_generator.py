"""HTML and Markdown report generator using Jinja2 templates."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from schemacheck.config import settings
from schemacheck.display import (
    get_score_band,
    get_status_icon,
    get_validation_status,
    get_validation_summary,
)
from schemacheck.models import BatchReport

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class ReportGenerator:
    """Renders page validation reports."""

    TEMPLATES = {
        "html": "report.html.j2",
        "markdown": "report.md.j2",
    }

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize report generator.

        Args:
            template_dir: Directory containing Jinja2 templates; defaults to
                ``REPORT_TEMPLATE_DIR`` or the packaged templates
        """
        template_path = Path(template_dir or settings.REPORT_TEMPLATE_DIR or DEFAULT_TEMPLATE_DIR)
        if not template_path.exists():
            logger.warning(f"Template directory {template_path} not found, using packaged templates")
            template_path = DEFAULT_TEMPLATE_DIR

        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(["html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters['score_band'] = lambda score: get_score_band(score).value
        self.env.filters['summary'] = get_validation_summary
        self.env.filters['status'] = lambda result: get_validation_status(result).value
        self.env.filters['status_icon'] = get_status_icon

    def render(self, report: BatchReport, fmt: str = "html", title: str = "Structured Data Report") -> str:
        """Render a report to a string.

        Args:
            report: The page's BatchReport
            fmt: "html" or "markdown"
            title: Report heading

        Returns:
            Rendered report
        """
        if fmt not in self.TEMPLATES:
            raise ValueError(f"Unsupported report format: {fmt}")

        template = self.env.get_template(self.TEMPLATES[fmt])
        return template.render(
            title=title,
            report=report,
            generated_at=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        )

    def generate_report(
        self,
        report: BatchReport,
        output_path: Path,
        fmt: str = "html",
        title: str = "Structured Data Report",
    ) -> None:
        """Render a report and write it to disk.

        Args:
            report: The page's BatchReport
            output_path: File to write
            fmt: "html" or "markdown"
            title: Report heading
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(report, fmt=fmt, title=title), encoding="utf-8")
        logger.info(f"Wrote {fmt} report to {output_path}")
