"""Merge new content into located nodes."""

import copy

from loguru import logger

from html_creator.errors import TargetNotFoundError
from html_creator.models.node import Children, Many, Node, NotFound, One, SearchResult, Text

NodeData = Node | list[Node]


def push_or_concat(target: list[Node], data: NodeData) -> list[Node]:
    """Append a node, or extend with a list of nodes. Returns ``target``."""
    if isinstance(data, list):
        target.extend(data)
    else:
        target.append(data)
    return target


def merge_content(node: Node, data: NodeData) -> None:
    """Add ``data`` after whatever the node already contains.

    Existing text is kept as a leading tagless node, so a node holding
    ``"hello"`` ends up with ``[Node(content=Text("hello")), *data]``.
    """
    content = node.content
    if isinstance(content, Children):
        push_or_concat(content.nodes, data)
    elif isinstance(content, Text):
        node.content = Children(push_or_concat([Node(content=Text(content.value))], data))
    else:
        node.content = Children(push_or_concat([], data))


def insert_into(result: SearchResult, data: NodeData) -> None:
    """Insert ``data`` into every node of a search result.

    With several targets each one receives its own deep copy of ``data``, so
    later edits to one target never show up in another.

    Raises:
        TargetNotFoundError: If the search found nothing.
    """
    if isinstance(result, One):
        merge_content(result.node, data)
    elif isinstance(result, Many):
        logger.debug("Inserting into {} targets", len(result.nodes))
        for node in result.nodes:
            merge_content(node, copy.deepcopy(data))
    elif isinstance(result, NotFound):
        msg = "Cannot insert content: no element matched the target"
        raise TargetNotFoundError(msg)
