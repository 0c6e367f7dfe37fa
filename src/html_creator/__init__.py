"""Build HTML documents from trees of nodes."""

from html_creator.creator import HtmlCreator
from html_creator.document import Document
from html_creator.errors import TargetNotFoundError
from html_creator.models.node import Children, Many, NoContent, Node, NotFound, One, Selector, Text
from html_creator.protocols import ReporterProtocol, WriterProtocol
from html_creator.writer import FileWriter

__all__ = [
    "Children",
    "Document",
    "FileWriter",
    "HtmlCreator",
    "Many",
    "NoContent",
    "Node",
    "NotFound",
    "One",
    "ReporterProtocol",
    "Selector",
    "TargetNotFoundError",
    "Text",
    "WriterProtocol",
]
