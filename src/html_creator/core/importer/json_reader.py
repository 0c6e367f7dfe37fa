"""Parse JSON node descriptors into domain models."""

from typing import Any

from html_creator.models.node import Children, Content, NoContent, Node, Text

# Descriptor keys accepted for each field, first match wins.
_TAG_KEYS = ("type", "tag")
_SUFFIX_KEYS = ("customTagContent", "rawSuffix")


def _first_key(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def parse_content(raw: Any) -> Content:
    """Turn a raw descriptor content value into a content variant."""
    if raw is None:
        return NoContent()
    if isinstance(raw, str):
        return Text(raw)
    if isinstance(raw, list):
        return Children(parse_forest(raw))
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return Text(str(raw))
    msg = f"Unsupported content type: {type(raw).__name__}"
    raise ValueError(msg)


def parse_node_data(data: dict[str, Any]) -> Node:
    """Parse a single node descriptor.

    Args:
        data: Descriptor with optional ``type`` (or ``tag``), ``attributes``,
            ``content`` and ``customTagContent`` (or ``rawSuffix``) keys.

    Returns:
        The node, with children parsed recursively.
    """
    if not isinstance(data, dict):
        msg = f"Node descriptor must be an object, got {type(data).__name__}"
        raise ValueError(msg)

    attributes = data.get("attributes") or {}
    if not isinstance(attributes, dict):
        msg = f"Attributes must be an object, got {type(attributes).__name__}"
        raise ValueError(msg)

    return Node(
        tag=_first_key(data, _TAG_KEYS) or None,
        attributes=dict(attributes),
        content=parse_content(data.get("content")),
        raw_suffix=_first_key(data, _SUFFIX_KEYS) or "",
    )


def parse_forest(data: list[Any]) -> list[Node]:
    """Parse a list of node descriptors."""
    if not isinstance(data, list):
        msg = f"A forest must be a list of nodes, got {type(data).__name__}"
        raise ValueError(msg)
    return [parse_node_data(item) for item in data]
