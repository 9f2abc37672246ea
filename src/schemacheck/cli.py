"""Command-line interface for the JSON-LD validator."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from schemacheck.config import ValidationThresholds, settings
from schemacheck.display import (
    get_score_band,
    get_status_icon,
    get_validation_summary,
)
from schemacheck.exceptions import InputFormatError, SchemaCheckError
from schemacheck.logging_config import setup_logging
from schemacheck.models import BatchReport, SchemaInput, ValidationResult
from schemacheck.output_manager import OutputManager
from schemacheck.report_generator import ReportGenerator
from schemacheck.validator import SchemaValidator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def load_batch_file(path: str) -> List[SchemaInput]:
    """Read a JSON list of ``{"type", "schema"}`` objects.

    ``schema`` may be JSON-LD text or an inline JSON object.

    Raises:
        InputFormatError: if the file cannot be read or has the wrong shape
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise InputFormatError(f"Could not read batch file {path}: {e}") from e

    if not isinstance(data, list):
        raise InputFormatError(f"Batch file {path} must contain a JSON list")

    documents = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or "type" not in item or "schema" not in item:
            raise InputFormatError(
                f"Item {index} in {path} must be an object with 'type' and 'schema'"
            )
        schema = item["schema"]
        if not isinstance(schema, str):
            schema = json.dumps(schema)
        documents.append(SchemaInput(type=str(item["type"]), schema=schema))

    return documents


def print_validation_result(label: str, result: ValidationResult):
    """Print a single document's result in a formatted way.

    Args:
        label: Document label (declared type)
        result: ValidationResult to print
    """
    score = result.score
    print(f"\n{'=' * 60}")
    print(f"{get_status_icon(result)} {label}")
    print(f"{'=' * 60}")
    print(f"\n📊 Score: {score}/100 ({get_score_band(score).value})")
    print(f"   {get_validation_summary(result)}")

    if result.errors:
        print("\n❌ Errors:")
        for finding in result.errors:
            _print_finding(finding)

    if result.warnings:
        print("\n⚠️  Warnings:")
        for finding in result.warnings:
            _print_finding(finding)

    if result.info:
        print("\n💡 Suggestions:")
        for finding in result.info:
            _print_finding(finding)


def _print_finding(finding):
    location = f" [{finding.path}]" if finding.path else ""
    print(f"  • {finding.message}{location}")
    if finding.suggestion:
        print(f"      → {finding.suggestion}")


def print_batch_report(report: BatchReport):
    """Print every document's result followed by page-level findings."""
    for doc in report.documents:
        print_validation_result(doc.declared_type, doc.result)

    if report.page_findings:
        print(f"\n{'=' * 60}")
        print("Page-level findings")
        print(f"{'=' * 60}")
        for finding in report.page_findings:
            _print_finding(finding)

    if report.recommendations:
        print("\n💡 Recommendations:")
        for rec in report.recommendations:
            print(f"  • {rec}")

    print(
        f"\nTotal: {len(report.errors)} errors, {len(report.warnings)} warnings, "
        f"{len(report.info)} suggestions across {len(report.documents)} schemas\n"
    )


def _write_or_print(output: str, output_file: Optional[str]):
    if output_file:
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"\nReport written to {output_file}")
    else:
        print(output)


def _load_thresholds(args) -> ValidationThresholds:
    if not args.thresholds:
        return ValidationThresholds.from_env()

    if not Path(args.thresholds).is_file():
        raise InputFormatError(f"Thresholds file {args.thresholds} does not exist")
    try:
        return ValidationThresholds.from_file(args.thresholds)
    except (OSError, ValueError) as e:
        raise InputFormatError(f"Could not read thresholds file {args.thresholds}: {e}") from e


def _build_validator(args) -> SchemaValidator:
    return SchemaValidator(thresholds=_load_thresholds(args))


def validate_command(args) -> int:
    """Validate a single JSON-LD file."""
    try:
        raw_text = Path(args.file).read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        raise InputFormatError(f"Could not read {args.file}: {e}") from e

    validator = _build_validator(args)
    result = validator.validate(args.type, raw_text)

    if args.output == "json":
        _write_or_print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), args.output_file)
    else:
        print_validation_result(args.type, result)

    return EXIT_OK if result.is_valid else EXIT_INVALID


def batch_command(args) -> int:
    """Validate every schema for one page and check how they relate."""
    documents = load_batch_file(args.file)
    validator = _build_validator(args)
    report = validator.validate_page(documents, max_workers=args.workers)

    if args.output == "json":
        _write_or_print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), args.output_file)
    elif args.output in ("html", "markdown"):
        generator = ReportGenerator()
        _write_or_print(
            generator.render(report, fmt=args.output, title=f"Structured Data Report: {Path(args.file).stem}"),
            args.output_file,
        )
    else:
        print_batch_report(report)

    if args.output_dir:
        output_manager = OutputManager(args.output_dir)
        run_dir = output_manager.create_run_directory(Path(args.file).stem)
        output_manager.save_batch_report(run_dir, report)
        print(f"\nResults saved to {run_dir}")

    all_valid = all(doc.result.is_valid for doc in report.documents)
    return EXIT_OK if all_valid else EXIT_INVALID


def thresholds_command(args) -> int:
    """Show the effective thresholds, optionally saving them for --thresholds."""
    thresholds = _load_thresholds(args)

    if args.save:
        thresholds.save_to_file(args.save)
        print(f"✅ Thresholds saved to {args.save}")
    else:
        print(json.dumps({"thresholds": thresholds.to_dict()}, indent=2))

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schemacheck",
        description="Validate Schema.org JSON-LD structured data and score its quality",
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.LOG_LEVEL.upper(),
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help="Write logs to file in addition to console",
    )
    parser.add_argument(
        "--thresholds",
        help="JSON file with threshold overrides",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a single JSON-LD file."
    )
    validate_parser.add_argument("file", help="Path to a JSON-LD file")
    validate_parser.add_argument(
        "--type",
        "-t",
        required=True,
        help="Expected Schema.org type (e.g., Article)",
    )
    validate_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    validate_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file (only for json format)",
    )
    validate_parser.set_defaults(func=validate_command)

    batch_parser = subparsers.add_parser(
        "batch", help="Validate all schemas for one page."
    )
    batch_parser.add_argument(
        "file", help='JSON file with a list of {"type": ..., "schema": ...} objects'
    )
    batch_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json", "html", "markdown"],
        default="text",
        help="Output format (default: text)",
    )
    batch_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file instead of stdout",
    )
    batch_parser.add_argument(
        "--output-dir",
        help="Also save report.json, per-document files and a summary under this directory",
    )
    batch_parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Validate documents on this many threads (default: 1)",
    )
    batch_parser.set_defaults(func=batch_command)

    thresholds_parser = subparsers.add_parser(
        "thresholds", help="Show the effective thresholds (environment or --thresholds file)."
    )
    thresholds_parser.add_argument(
        "--save",
        metavar="PATH",
        help="Write the thresholds to a JSON file usable with --thresholds",
    )
    thresholds_parser.set_defaults(func=thresholds_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=getattr(args, 'log_file', None),
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_USAGE

    try:
        return args.func(args)
    except SchemaCheckError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
