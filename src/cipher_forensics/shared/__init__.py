"""Moduły współdzielone: konfiguracja, logowanie, raporty błędów."""

from .config import AppConfig, FileTooLargeError
from .error_reporting import ErrorReport, get_error_reports_dir, write_error_report
from .logging import configure_logging

__all__ = [
	"AppConfig",
	"FileTooLargeError",
	"configure_logging",
	"ErrorReport",
	"get_error_reports_dir",
	"write_error_report",
]
