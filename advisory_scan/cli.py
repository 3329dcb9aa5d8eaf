"""
Command-line interface for the vulnerability scanner.
"""

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from pyfiglet import figlet_format

from . import __version__
from .config import ScannerSettings, parse_timeout
from .errors import ScanError
from .models import ScanConfig, Severity
from .progress import ProgressIndicator
from .reporting import format_report
from .scanner import VulnerabilityScanner


logger = logging.getLogger(__name__)


def timeout_arg(value: str) -> float:
    try:
        return parse_timeout(value)
    except ScanError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advisory-scan",
        description="Scan the dependencies of a package.json against the GitHub advisory database"
    )

    parser.add_argument(
        "-f", "--file",
        default=None,
        help="Manifest file or project directory. Default: current directory"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Include advisory descriptions in the report"
    )

    parser.add_argument(
        "-s", "--severity",
        default=None,
        help="Minimum severity to report. Possible values: low, medium, high, critical"
    )

    parser.add_argument(
        "--timeout",
        type=timeout_arg,
        default=None,
        help="Advisory query timeout in seconds. Default: 30"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in the report"
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not show the progress bar"
    )

    parser.add_argument(
        "--log-level",
        default=os.environ.get("ADVISORY_SCAN_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level. Default: WARNING"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def run(argv=None) -> int:
    """Run the scanner and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        min_severity = Severity.parse(args.severity, strict=True) if args.severity else None
    except ScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    config = ScanConfig(min_severity=min_severity, verbose=args.verbose)
    try:
        settings = ScannerSettings.from_env()
    except ScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    if args.timeout is not None:
        settings = replace(settings, timeout=args.timeout)

    manifest_path = Path(args.file) if args.file else Path.cwd()
    scanner = VulnerabilityScanner(manifest_path, settings=settings, config=config)

    print(figlet_format("Scanning..."))
    progress = None if args.no_progress else ProgressIndicator().start()

    try:
        result = scanner.scan()
    except ScanError as e:
        if progress is not None:
            progress.cancel()
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    if progress is not None:
        progress.wait()

    print("Vulnerability scan done")
    print("Generating report...")
    declared = {dep.name: dep.version for dep in result.dependencies}
    print(format_report(result.findings, config.verbose, color=not args.no_color, declared=declared))
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
