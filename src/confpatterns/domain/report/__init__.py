"""Report domain - builder pattern."""

from .builders import HtmlReportBuilder, ReportBuilder, TextReportBuilder
from .director import ReportDirector
from .report import Report

__all__ = [
    "Report",
    "ReportBuilder",
    "TextReportBuilder",
    "HtmlReportBuilder",
    "ReportDirector",
]
