"""HtmlCreator: a Document plus rendering to string or file."""

from pathlib import Path

from html_creator.core.tree.mutator import NodeData
from html_creator.document import Document
from html_creator.errors import PersistError
from html_creator.models.node import Node
from html_creator.protocols import ReporterProtocol, WriterProtocol
from html_creator.reporter import LoguruReporter, Severity
from html_creator.writer import FileWriter


class HtmlCreator:
    """Build an HTML document and render it.

    The reporter and writer are injectable so callers and tests can capture
    diagnostics and output without touching the console or the filesystem.
    """

    def __init__(
        self,
        content: list[Node] | None = None,
        *,
        reporter: ReporterProtocol | None = None,
        writer: WriterProtocol | None = None,
    ) -> None:
        self.reporter = reporter or LoguruReporter()
        self.writer = writer or FileWriter()
        self.document = Document(content, reporter=self.reporter)

    def with_boilerplate(self, content: NodeData | None = None) -> "HtmlCreator":
        self.document.with_boilerplate(content)
        return self

    def render_html(self, *, exclude_html_tag: bool = False) -> str:
        """Render the document, optionally without doctype and ``html`` wrapper."""
        if exclude_html_tag:
            return self.document.get_content_in_html()
        return self.document.get_html()

    def render_html_to_file(self, destination: str | Path) -> bool:
        """Render the full document into a file.

        Failures are reported rather than raised.

        Returns:
            True if the file was written.
        """
        try:
            self.writer.persist(destination, self.render_html())
        except PersistError as e:
            self.reporter.report(Severity.ERROR, str(e))
            return False
        self.reporter.report(Severity.SUCCESS, f"HTML generated ({destination})")
        return True
