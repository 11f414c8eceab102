from confpatterns.domain.report.builders import ReportBuilder
from confpatterns.domain.report.report import Report


class ReportDirector:
    """Drives a builder through the standard report layout."""

    HEADER = "Report Header"
    CONTENT = "This is the report content."
    FOOTER = "Report Footer"

    def construct_report(self, builder: ReportBuilder) -> Report:
        builder.set_header(self.HEADER)
        builder.set_content(self.CONTENT)
        builder.set_footer(self.FOOTER)
        return builder.get_report()
