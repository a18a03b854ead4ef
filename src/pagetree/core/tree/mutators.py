"""Copy-on-write primitives that produce a new forest from an old one.

Only the nodes along the edited path are rebuilt. Every other subtree is
shared between the old and the new forest, so the old forest stays valid.
"""

from collections.abc import Callable

from loguru import logger

from pagetree.models.node import Forest, Node, Path, Removal

# Splice index meaning "after the last sibling".
APPEND = -1


def _rewrite(
    siblings: Forest,
    parent_path: Path,
    update: Callable[[Forest], Forest | None],
) -> Forest | None:
    """Apply ``update`` to the children of the node at ``parent_path``.

    An empty ``parent_path`` means the sibling sequence itself. Every ancestor
    on the way down is replaced by a copy holding the rewritten children.
    Returns None if the path does not resolve or ``update`` declines.
    """
    if not parent_path:
        return update(siblings)

    index, rest = parent_path[0], parent_path[1:]
    if not 0 <= index < len(siblings):
        return None
    node = siblings[index]
    children = _rewrite(node.children, rest, update)
    if children is None:
        return None
    return (*siblings[:index], node.with_children(children), *siblings[index + 1 :])


def remove_at_path(forest: Forest, path: Path) -> Removal | None:
    """Remove the subtree at ``path``.

    Returns:
        The removed node (with its descendants untouched) and the new forest,
        or None if the path is empty or does not resolve.
    """
    if not path:
        return None

    removed: list[Node] = []
    index = path[-1]

    def drop(siblings: Forest) -> Forest | None:
        if not 0 <= index < len(siblings):
            return None
        removed.append(siblings[index])
        return (*siblings[:index], *siblings[index + 1 :])

    new_forest = _rewrite(forest, path[:-1], drop)
    if new_forest is None:
        logger.debug("remove_at_path: path {} does not resolve", path)
        return None
    return Removal(node=removed[0], forest=new_forest)


def insert_at_path(forest: Forest, path: Path, node: Node) -> Forest:
    """Splice ``node`` into the forest at ``path``.

    All but the last element of ``path`` select the parent (a single element
    means root level). The last element is the position among the parent's
    children: later siblings shift right, and an index equal to the number of
    children (or ``-1``, or anything past the end) appends.

    The identity of ``node`` is not checked for uniqueness. Returns the input
    forest unchanged if the parent does not resolve or the index is negative.
    """
    if not path:
        return forest

    index = path[-1]
    if index < 0 and index != APPEND:
        logger.debug("insert_at_path: negative index in {}", path)
        return forest

    def splice(siblings: Forest) -> Forest:
        at = len(siblings) if index == APPEND else min(index, len(siblings))
        return (*siblings[:at], node, *siblings[at:])

    new_forest = _rewrite(forest, path[:-1], splice)
    if new_forest is None:
        logger.debug("insert_at_path: parent of {} does not resolve", path)
        return forest
    return new_forest


def replace_at_path(forest: Forest, path: Path, fn: Callable[[Node], Node]) -> Forest:
    """Replace the node at ``path`` with ``fn(node)``.

    Returns the input forest unchanged if the path does not resolve.
    """
    if not path:
        return forest

    index = path[-1]

    def swap(siblings: Forest) -> Forest | None:
        if not 0 <= index < len(siblings):
            return None
        return (*siblings[:index], fn(siblings[index]), *siblings[index + 1 :])

    new_forest = _rewrite(forest, path[:-1], swap)
    if new_forest is None:
        logger.debug("replace_at_path: path {} does not resolve", path)
        return forest
    return new_forest
