"""Shared test fixtures."""

import json
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from html_creator.document import Document
from html_creator.models.node import Children, Node, Text
from tests.unit.fakes import FakeReporter

SAMPLE_DESCRIPTORS = [
    {
        "type": "div",
        "attributes": {"id": "main", "class": "box"},
        "content": [
            {"type": "p", "attributes": {"class": "note"}, "content": "First"},
            {
                "type": "section",
                "content": [
                    {"type": "p", "attributes": {"class": "note"}, "content": "Second"},
                ],
            },
        ],
    },
    {"type": "footer", "attributes": {"class": "box"}},
]


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Restore the default loguru sink after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def reporter() -> FakeReporter:
    return FakeReporter()


@pytest.fixture
def sample_forest() -> list[Node]:
    """A two-level forest: div#main.box > (p.note, section > p.note), footer.box."""
    return [
        Node(
            tag="div",
            attributes={"id": "main", "class": "box"},
            content=Children(
                [
                    Node(tag="p", attributes={"class": "note"}, content=Text("First")),
                    Node(
                        tag="section",
                        content=Children(
                            [Node(tag="p", attributes={"class": "note"}, content=Text("Second"))]
                        ),
                    ),
                ]
            ),
        ),
        Node(tag="footer", attributes={"class": "box"}),
    ]


@pytest.fixture
def sample_document(sample_forest: list[Node], reporter: FakeReporter) -> Document:
    return Document(sample_forest, reporter=reporter)


@pytest.fixture
def sample_source(tmp_path: Path) -> Path:
    """Write the sample descriptors to a JSON file and return its path."""
    source = tmp_path / "page.json"
    source.write_text(json.dumps(SAMPLE_DESCRIPTORS))
    return source
