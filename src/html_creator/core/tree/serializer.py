"""Render node trees as HTML."""

import io
import re
from collections.abc import Mapping, Sequence

from html_creator.config import DOCTYPE
from html_creator.models.node import AttributeValue, Children, Node, Text

_UPPERCASE = re.compile(r"([A-Z])")


def kebab_case(key: str) -> str:
    """Turn a camelCase attribute name into kebab-case (``dataFoo`` -> ``data-foo``)."""
    return _UPPERCASE.sub(lambda m: f"-{m.group(1).lower()}", key)


def _format_value(value: AttributeValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_attributes(attributes: Mapping[str, AttributeValue] | None) -> str:
    """Render attributes as ` key="value"` pairs, in mapping order.

    Values are emitted verbatim: quotes inside values are not escaped.
    """
    if not attributes:
        return ""
    return "".join(
        f' {kebab_case(key)}="{_format_value(value)}"' for key, value in attributes.items()
    )


def _render_content(node: Node) -> str:
    content = node.content
    if isinstance(content, Children):
        return render_nodes(content.nodes)
    if isinstance(content, Text):
        return content.value
    return ""


def render_node(node: Node) -> str:
    """Render a single node and everything below it.

    A node without a tag renders only its content. A tagged node with
    nothing inside closes immediately after the opening tag.
    """
    inner = _render_content(node)
    if node.tag is None:
        return inner

    out = io.StringIO()
    out.write(f"<{node.tag}{render_attributes(node.attributes)}{node.raw_suffix}>")
    out.write(inner)
    out.write(f"</{node.tag}>")
    return out.getvalue()


def render_nodes(nodes: Sequence[Node]) -> str:
    """Render a sequence of nodes, concatenated in order."""
    if not isinstance(nodes, (list, tuple)):
        return ""
    return "".join(render_node(node) for node in nodes)


def render_document(nodes: Sequence[Node]) -> str:
    """Render a forest wrapped in the doctype and the root ``html`` element."""
    return f"{DOCTYPE}<html>{render_nodes(nodes)}</html>"
