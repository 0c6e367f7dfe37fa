"""Domain models for the HTML document tree."""

from dataclasses import dataclass, field
from typing import Literal

AttributeValue = str | int | float | bool


@dataclass(frozen=True)
class NoContent:
    """Content of a node that has nothing inside it yet."""


@dataclass(frozen=True)
class Text:
    """Plain text content."""

    value: str


@dataclass
class Children:
    """An ordered sequence of child nodes."""

    nodes: list["Node"] = field(default_factory=list)


Content = NoContent | Text | Children


@dataclass
class Node:
    """A single element of a document forest.

    A node without a tag is a bare content fragment and renders without any
    wrapping markup.
    """

    tag: str | None = None
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    content: Content = field(default_factory=NoContent)
    raw_suffix: str = ""


@dataclass(frozen=True)
class NotFound:
    """Search result when nothing matched."""


@dataclass(frozen=True)
class One:
    """Search result holding exactly one match."""

    node: Node


@dataclass(frozen=True)
class Many:
    """Search result holding two or more matches, in document order."""

    nodes: tuple[Node, ...]


SearchResult = NotFound | One | Many

SelectorKind = Literal["type", "id", "class"]


@dataclass(frozen=True)
class Selector:
    """A search predicate: exactly one of tag type, id or class."""

    kind: SelectorKind
    value: str

    @classmethod
    def by_tag(cls, tag: str) -> "Selector":
        return cls("type", tag)

    @classmethod
    def by_id(cls, id: str) -> "Selector":
        return cls("id", id)

    @classmethod
    def by_class(cls, class_name: str) -> "Selector":
        return cls("class", class_name)

    @classmethod
    def from_target(
        cls,
        *,
        id: str | None = None,
        class_name: str | None = None,
        tag: str | None = None,
    ) -> "Selector":
        """Build a selector from keyword targets, exactly one of which must be set."""
        given = [
            (kind, value)
            for kind, value in (("id", id), ("class", class_name), ("type", tag))
            if value
        ]
        if len(given) != 1:
            msg = f"Exactly one of id, class_name or tag is required, got {len(given)}"
            raise ValueError(msg)
        kind, value = given[0]
        return cls(kind, value)  # type: ignore[arg-type]

    def matches(self, node: Node) -> bool:
        if self.kind == "type":
            return node.tag == self.value
        if self.kind == "id":
            return node.attributes.get("id") == self.value
        return node.attributes.get("class") == self.value
