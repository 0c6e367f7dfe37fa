"""The Document: a forest of nodes with search, mutation and rendering."""

from typing import Any

from html_creator.config import CHARSET_META, VIEWPORT_META
from html_creator.core.search.locator import find_nodes
from html_creator.core.tree.mutator import NodeData, insert_into, merge_content, push_or_concat
from html_creator.core.tree.serializer import render_document, render_nodes
from html_creator.models.node import Children, Many, Node, One, SearchResult, Selector, Text
from html_creator.protocols import ReporterProtocol
from html_creator.reporter import LoguruReporter, Severity


def _first(result: SearchResult) -> Node | None:
    if isinstance(result, One):
        return result.node
    if isinstance(result, Many):
        return result.nodes[0]
    return None


class Document:
    """An HTML document held as a forest of nodes.

    The forest has no implicit root: ``get_html`` wraps it in the doctype and
    the ``html`` element when rendering.
    """

    def __init__(
        self,
        content: list[Node] | None = None,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        self.reporter = reporter or LoguruReporter()
        self.content: list[Node] = []
        if content is not None:
            self.set_content(content)

    def set_content(self, content: Any) -> list[Node] | None:
        """Replace the forest.

        Anything other than a list is reported as an error and the current
        forest is kept.
        """
        if not isinstance(content, list):
            self.reporter.report(Severity.ERROR, "The content needs to be provided as a list")
            return None
        self.content = content
        return content

    def get_content_in_html(self) -> str:
        """Render the forest without doctype or ``html`` wrapper."""
        return render_nodes(self.content)

    def get_html(self) -> str:
        return render_document(self.content)

    def find(self, selector: Selector) -> SearchResult:
        return find_nodes(self.content, selector)

    def find_element_by_type(self, needle: str) -> SearchResult:
        return self.find(Selector.by_tag(needle))

    def find_element_by_id(self, needle: str) -> SearchResult:
        return self.find(Selector.by_id(needle))

    def find_element_by_class_name(self, needle: str) -> SearchResult:
        return self.find(Selector.by_class(needle))

    def set_title(self, new_title: str) -> str:
        """Set the document title.

        Replaces the content of an existing ``title`` element. Otherwise a
        ``title`` is appended to an existing ``head``, and failing that a new
        ``head`` holding the title is appended to the forest. When several
        elements match, the first one in document order is used.
        """
        title = _first(self.find_element_by_type("title"))
        if title is not None:
            title.content = Text(new_title)
            return new_title

        head = _first(self.find_element_by_type("head"))
        if head is not None:
            merge_content(head, Node(tag="title", content=Text(new_title)))
            return new_title

        self.content.append(
            Node(tag="head", content=Children([Node(tag="title", content=Text(new_title))]))
        )
        return new_title

    def with_boilerplate(self, content: NodeData | None = None) -> "Document":
        """Reset the forest to a minimal head and a body wrapping ``content``."""
        body_content = Children()
        if content is not None:
            push_or_concat(body_content.nodes, content)
        self.content = [
            Node(
                tag="head",
                content=Children(
                    [
                        Node(tag="meta", attributes=dict(CHARSET_META)),
                        Node(tag="meta", attributes=dict(VIEWPORT_META)),
                    ]
                ),
            ),
            Node(tag="body", content=body_content),
        ]
        return self

    def add_element(self, element_data: NodeData) -> "Document":
        """Append a node, or a list of nodes, to the end of the forest."""
        push_or_concat(self.content, element_data)
        return self

    def add_element_to_target(
        self,
        element_data: NodeData,
        *,
        id: str | None = None,
        class_name: str | None = None,
        tag: str | None = None,
    ) -> "Document":
        """Add content to every element matching exactly one of id, class_name or tag.

        Raises:
            ValueError: If not exactly one target key is given.
            TargetNotFoundError: If no element matches.
        """
        selector = Selector.from_target(id=id, class_name=class_name, tag=tag)
        insert_into(self.find(selector), element_data)
        return self

    def add_element_to_id(self, id: str, element_data: NodeData) -> "Document":
        return self.add_element_to_target(element_data, id=id)

    def add_element_to_class(self, class_name: str, element_data: NodeData) -> "Document":
        return self.add_element_to_target(element_data, class_name=class_name)

    def add_element_to_type(self, tag: str, element_data: NodeData) -> "Document":
        return self.add_element_to_target(element_data, tag=tag)
