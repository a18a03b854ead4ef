"""Fakes and builders for testing the tree editor."""

from typing import Any

from pagetree.core.events.dispatcher import ActionPayload
from pagetree.models.node import Forest, Node


class FakeMinter:
    """Deterministic minter producing ``kind-1``, ``kind-2``, ...

    Records every kind it was asked for.
    """

    def __init__(self) -> None:
        self.count = 0
        self.kinds: list[str] = []

    def mint(self, kind: str) -> str:
        self.count += 1
        self.kinds.append(kind)
        return f"{kind}-{self.count}"


class FakeDispatcher:
    """Dispatcher that records invocations instead of running handlers."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ActionPayload | None]] = []

    def invoke(self, action: str, payload: Any = None) -> None:
        self.calls.append((action, payload))


def make_node(node_id: str, *children: Node, kind: str = "div", **attributes: Any) -> Node:
    """Build a node with the given children and attributes."""
    return Node(id=node_id, kind=kind, attributes=attributes, children=children)


def shape(forest: Forest) -> list[Any]:
    """Reduce a forest to its ids: leaves as ``"id"``, parents as ``("id", [...])``."""
    return [n.id if not n.children else (n.id, shape(n.children)) for n in forest]


HOME_PAGE = {
    "id": "home",
    "title": "Home",
    "slug": "home",
    "components": [
        {
            "tag": "section",
            "style": {"padding": "p-4"},
            "children": [
                {"tag": "h1", "content": "Welcome"},
                {"tag": "p", "content": "Intro"},
            ],
        },
        {"tag": "footer", "content": "Bye"},
    ],
}

ABOUT_PAGE = {
    "id": "about",
    "title": "About",
    "slug": "about",
    "components": [{"tag": "p", "content": "About us"}],
}
