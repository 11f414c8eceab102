from dataclasses import dataclass


@dataclass
class Report:
    """A report made of a header, a content block and a footer."""
    header: str = ""
    content: str = ""
    footer: str = ""

    def render(self) -> str:
        """Render the report as three labelled lines."""
        return (
            f"Header: {self.header}\n"
            f"Content: {self.content}\n"
            f"Footer: {self.footer}"
        )
