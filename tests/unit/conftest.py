"""Shared test fixtures."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from pagetree.models.node import Forest
from tests.unit.fakes import ABOUT_PAGE, HOME_PAGE, FakeMinter, make_node


@pytest.fixture
def abc_forest() -> Forest:
    """Three leaf roots: A, B, C."""
    return (make_node("A"), make_node("B"), make_node("C"))


@pytest.fixture
def nested_forest() -> Forest:
    """A(A1, A2(A2a, A2b)), B(B1), C."""
    return (
        make_node(
            "A",
            make_node("A1"),
            make_node("A2", make_node("A2a"), make_node("A2b")),
        ),
        make_node("B", make_node("B1")),
        make_node("C"),
    )


@pytest.fixture
def minter() -> FakeMinter:
    return FakeMinter()


@pytest.fixture
def pages_file(tmp_path: Path) -> Path:
    """Return a pages document with a home and an about page."""
    path = tmp_path / "pages.json"
    path.write_text(json.dumps([HOME_PAGE, ABOUT_PAGE]))
    return path


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
