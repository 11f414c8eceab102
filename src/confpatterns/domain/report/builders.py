"""Report builders.

Each builder decorates the parts it receives in its own output style and
hands back a finished ``Report``.
"""
from abc import ABC, abstractmethod
from dataclasses import replace

from confpatterns.domain.report.report import Report


class ReportBuilder(ABC):
    """Interface for step-by-step report construction."""

    def __init__(self):
        self._report = Report()

    @abstractmethod
    def set_header(self, header: str) -> "ReportBuilder":
        """Set the report header."""
        pass

    @abstractmethod
    def set_content(self, content: str) -> "ReportBuilder":
        """Set the report content."""
        pass

    @abstractmethod
    def set_footer(self, footer: str) -> "ReportBuilder":
        """Set the report footer."""
        pass

    def get_report(self) -> Report:
        """Return a copy of the report built so far."""
        return replace(self._report)


class TextReportBuilder(ReportBuilder):
    """Builds plain-text reports with labelled parts."""

    def set_header(self, header: str) -> "TextReportBuilder":
        self._report.header = f"Text Header: {header}"
        return self

    def set_content(self, content: str) -> "TextReportBuilder":
        self._report.content = f"Text Content: {content}"
        return self

    def set_footer(self, footer: str) -> "TextReportBuilder":
        self._report.footer = f"Text Footer: {footer}"
        return self


class HtmlReportBuilder(ReportBuilder):
    """Builds reports whose parts are wrapped in HTML tags.

    Text is inserted as given, without escaping.
    """

    def set_header(self, header: str) -> "HtmlReportBuilder":
        self._report.header = f"<h1>{header}</h1>"
        return self

    def set_content(self, content: str) -> "HtmlReportBuilder":
        self._report.content = f"<p>{content}</p>"
        return self

    def set_footer(self, footer: str) -> "HtmlReportBuilder":
        self._report.footer = f"<footer>{footer}</footer>"
        return self
