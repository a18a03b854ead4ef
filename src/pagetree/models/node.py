"""Domain models for the page tree."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Node:
    """A single node in a page tree.

    Nodes are never modified in place. Edits produce a new node that shares
    every untouched field (and child subtree) with the old one.
    """

    id: str
    kind: str
    attributes: dict[str, Any] = field(default_factory=dict)
    styles: dict[str, str] = field(default_factory=dict)
    children: tuple[Node, ...] = ()
    # The ``id`` the node had in page JSON, kept apart from the minted identity.
    external_id: str | None = None

    def with_children(self, children: tuple[Node, ...]) -> Node:
        """Return a copy of this node with a different children sequence."""
        return replace(self, children=children)

    def evolve(self, **changes: Any) -> Node:
        """Return a copy of this node with the given fields replaced."""
        return replace(self, **changes)

    @property
    def text(self) -> str | None:
        value = self.attributes.get("text")
        return value if isinstance(value, str) else None


# An ordered sequence of root nodes: one page's whole editable document.
Forest = tuple[Node, ...]

# Child indices from the forest roots down to a node. Only valid for the
# forest snapshot it was computed against.
Path = tuple[int, ...]


@dataclass(frozen=True)
class Removal:
    """Result of removing a subtree from a forest."""

    node: Node
    forest: Forest


@dataclass(frozen=True)
class Page:
    """A page of the persisted document, with components in wire format."""

    id: str
    title: str
    slug: str
    components: tuple[dict[str, Any], ...] = ()
