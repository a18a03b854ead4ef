"""Structural edits on a page forest.

Every operation takes node identities, resolves their paths against the forest
it is given (re-resolving after each intermediate step), and returns a new
forest. If any node cannot be resolved the input forest is returned unchanged.
"""

from typing import Any, Literal

from loguru import logger

from pagetree.config import DEFAULT_CONTAINER_STYLES, DEFAULT_KIND
from pagetree.core.tree.mutators import APPEND, insert_at_path, remove_at_path, replace_at_path
from pagetree.core.tree.paths import find_path_by_id, get_at_path
from pagetree.models.node import Forest, Node
from pagetree.protocols import MinterProtocol

DropZone = Literal["before", "after"]

_DROP_ZONES: tuple[DropZone, ...] = ("before", "after")


def move_up(forest: Forest, node_id: str) -> Forest:
    """Swap a node with its preceding sibling."""
    path = find_path_by_id(forest, node_id)
    if path is None or path[-1] == 0:
        return forest
    removal = remove_at_path(forest, path)
    if removal is None:
        return forest
    return insert_at_path(removal.forest, (*path[:-1], path[-1] - 1), removal.node)


def move_down(forest: Forest, node_id: str) -> Forest:
    """Swap a node with its following sibling."""
    path = find_path_by_id(forest, node_id)
    if path is None:
        return forest
    removal = remove_at_path(forest, path)
    if removal is None:
        return forest
    parent_path = path[:-1]
    parent = get_at_path(removal.forest, parent_path)
    siblings = parent.children if parent is not None else removal.forest
    if path[-1] >= len(siblings):
        # Already the last child.
        return forest
    # Removal shifted later siblings left, so index + 1 lands after the old next sibling.
    return insert_at_path(removal.forest, (*parent_path, path[-1] + 1), removal.node)


def outdent(forest: Forest, node_id: str) -> Forest:
    """Move a node out of its parent, right after the parent."""
    path = find_path_by_id(forest, node_id)
    if path is None or len(path) <= 1:
        return forest
    parent_path = path[:-1]
    removal = remove_at_path(forest, path)
    if removal is None:
        return forest
    return insert_at_path(removal.forest, (*parent_path[:-1], parent_path[-1] + 1), removal.node)


def indent(forest: Forest, node_id: str) -> Forest:
    """Make a node the last child of its preceding sibling.

    Works at any depth. A first child has nothing to indent under and is
    left in place.
    """
    path = find_path_by_id(forest, node_id)
    if path is None or path[-1] == 0:
        return forest
    removal = remove_at_path(forest, path)
    if removal is None:
        return forest
    # The previous sibling sits before the removed node, so its path is unchanged.
    previous_path = (*path[:-1], path[-1] - 1)
    return replace_at_path(
        removal.forest,
        previous_path,
        lambda previous: previous.with_children((*previous.children, removal.node)),
    )


def merge(forest: Forest, from_id: str, target_id: str) -> Forest:
    """Move the ``from`` node to be the last child of the ``target`` node."""
    if from_id == target_id:
        return forest
    from_path = find_path_by_id(forest, from_id)
    if from_path is None:
        return forest
    removal = remove_at_path(forest, from_path)
    if removal is None:
        return forest
    # Resolve after removal: indices on the way to the target may have shifted.
    # A target inside the removed subtree is no longer found, which rules out cycles.
    target_path = find_path_by_id(removal.forest, target_id)
    if target_path is None:
        logger.debug("merge: target {} not found outside {}", target_id, from_id)
        return forest
    return insert_at_path(removal.forest, (*target_path, APPEND), removal.node)


def reorder(forest: Forest, from_id: str, to_id: str, zone: DropZone) -> Forest:
    """Move the ``from`` node directly before or after the ``to`` node.

    Given roots ``[A, B, C]``, moving A after C yields ``[B, C, A]`` and
    moving C before A yields ``[C, A, B]``.
    """
    if zone not in _DROP_ZONES:
        logger.debug("reorder: unknown drop zone {!r}", zone)
        return forest
    if from_id == to_id:
        return forest
    from_path = find_path_by_id(forest, from_id)
    to_path = find_path_by_id(forest, to_id)
    if from_path is None or to_path is None:
        return forest
    removal = remove_at_path(forest, from_path)
    if removal is None:
        return forest
    new_to_path = find_path_by_id(removal.forest, to_id)
    if new_to_path is None:
        return forest

    parent_path = new_to_path[:-1]
    if from_path[:-1] == to_path[:-1]:
        # Same parent: count from the target's pre-removal position, then undo
        # the shift the removal caused for everything after the source.
        insert_index = to_path[-1] + (1 if zone == "after" else 0)
        if from_path[-1] < insert_index:
            insert_index -= 1
    else:
        insert_index = new_to_path[-1] + (1 if zone == "after" else 0)
    return insert_at_path(removal.forest, (*parent_path, insert_index), removal.node)


def split_drop_target(target: str) -> tuple[str, DropZone | None]:
    """Split a drop target such as ``"abc-before"`` into id and zone.

    A bare identity means a drop onto the row itself (zone None), which the
    caller treats as a merge.
    """
    for zone in _DROP_ZONES:
        suffix = f"-{zone}"
        if target.endswith(suffix):
            return target[: -len(suffix)], zone
    return target, None


def delete_node(forest: Forest, node_id: str) -> Forest:
    """Remove a node and its whole subtree."""
    path = find_path_by_id(forest, node_id)
    if path is None:
        return forest
    removal = remove_at_path(forest, path)
    return removal.forest if removal is not None else forest


def add_child(forest: Forest, parent_id: str, node: Node) -> Forest:
    """Append ``node`` as the last child of the given parent."""
    path = find_path_by_id(forest, parent_id)
    if path is None:
        return forest
    return insert_at_path(forest, (*path, APPEND), node)


def add_root(forest: Forest, node: Node) -> Forest:
    """Append ``node`` at root level."""
    return (*forest, node)


def new_container(minter: MinterProtocol) -> Node:
    """Create an empty container node with the default container styles."""
    return Node(id=minter.mint("container"), kind=DEFAULT_KIND, styles=dict(DEFAULT_CONTAINER_STYLES))


def add_container(forest: Forest, node_id: str, *, minter: MinterProtocol) -> Forest:
    """Append a fresh empty container as the last child of a node."""
    return add_child(forest, node_id, new_container(minter))


def update_node(
    forest: Forest,
    node_id: str,
    *,
    attributes: dict[str, Any] | None = None,
    styles: dict[str, str] | None = None,
    kind: str | None = None,
) -> Forest:
    """Merge attribute and style updates into a node.

    Args:
        forest: The forest to edit.
        node_id: Identity of the node to update.
        attributes: Attributes to set; other attributes are kept.
        styles: Style buckets to set; other buckets are kept.
        kind: New node kind.
    """
    path = find_path_by_id(forest, node_id)
    if path is None:
        return forest

    def apply(node: Node) -> Node:
        changes: dict[str, Any] = {}
        if attributes is not None:
            changes["attributes"] = {**node.attributes, **attributes}
        if styles is not None:
            changes["styles"] = {**node.styles, **styles}
        if kind is not None:
            changes["kind"] = kind
        return node.evolve(**changes)

    return replace_at_path(forest, path, apply)
