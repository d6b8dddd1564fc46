"""Graph persistence: plain-text reports and collision-free backup naming."""

from src.persistence.naming import BACKUP_PREFIX, backup_path
from src.persistence.report import (
    ReportFormatError,
    SavedReport,
    format_report,
    load_report,
    parse_report,
    save_report,
)

__all__ = [
    "BACKUP_PREFIX",
    "ReportFormatError",
    "SavedReport",
    "backup_path",
    "format_report",
    "load_report",
    "parse_report",
    "save_report",
]
