"""Deep search of a node forest."""

from collections.abc import Sequence

from html_creator.models.node import Children, Many, Node, NotFound, One, SearchResult, Selector


def _collect_matches(stack: Sequence[Node], selector: Selector) -> list[Node]:
    """Collect every match below ``stack`` as one flat list.

    Matches of the current level come first, followed by the matches found in
    each child sequence, in document order.
    """
    matches = [node for node in stack if selector.matches(node)]
    for node in stack:
        if isinstance(node.content, Children):
            matches.extend(_collect_matches(node.content.nodes, selector))
    return matches


def find_nodes(stack: Sequence[Node], selector: Selector) -> SearchResult:
    """Search a forest for all nodes matching a selector.

    Args:
        stack: The sequence of nodes to search, recursively.
        selector: Tag type, id or class to match.

    Returns:
        NotFound when nothing matched, One for a single match, Many otherwise.
    """
    if not isinstance(stack, (list, tuple)):
        return NotFound()

    matches = _collect_matches(stack, selector)
    if not matches:
        return NotFound()
    if len(matches) == 1:
        return One(matches[0])
    return Many(tuple(matches))
