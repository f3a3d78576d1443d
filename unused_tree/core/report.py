"""Persisting the report to disk."""

import logging
from pathlib import Path

from ..config import ReportWriteError

logger = logging.getLogger(__name__)


def format_report(check_path: str, report: str) -> str:
    """Report file content: the check path on the first line, then the tree."""
    return check_path + '\n' + report


def write_report(report_path: Path, check_path: str, report: str) -> Path:
    """Write the report, replacing any existing file at report_path.

    Raises:
        ReportWriteError: If the file cannot be removed or written
    """
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        if report_path.exists():
            report_path.unlink()
        report_path.write_text(format_report(check_path, report), encoding='utf-8')
    except OSError as e:
        raise ReportWriteError(f"Failed to write report '{report_path}': {e}") from e

    logger.info("Report saved: %s", report_path)
    return report_path
