"""Tree navigation: locate nodes and the index paths that lead to them."""

from collections import deque
from collections.abc import Callable, Iterator

from pagetree.models.node import Forest, Node, Path


def find_path(forest: Forest, predicate: Callable[[Node], bool]) -> Path | None:
    """Find the path of the first node matching ``predicate``.

    The forest is walked breadth-first, so when several nodes match, the one
    closest to the roots wins (ties at the same depth go to document order).
    The result is the same on every call against the same forest.

    Returns:
        The index path of the match, or None if no node matches.
    """
    todo: deque[tuple[Node, Path]] = deque((node, (i,)) for i, node in enumerate(forest))
    while todo:
        node, path = todo.popleft()
        if predicate(node):
            return path
        for i, child in enumerate(node.children):
            todo.append((child, (*path, i)))
    return None


def find_path_by_id(forest: Forest, node_id: str) -> Path | None:
    """Find the path of the node with the given identity."""
    return find_path(forest, lambda node: node.id == node_id)


def get_at_path(forest: Forest, path: Path) -> Node | None:
    """Return the node at ``path``, or None if the path does not resolve."""
    if not path:
        return None
    siblings = forest
    node: Node | None = None
    for index in path:
        if not 0 <= index < len(siblings):
            return None
        node = siblings[index]
        siblings = node.children
    return node


def iter_with_paths(forest: Forest, prefix: Path = ()) -> Iterator[tuple[Path, Node]]:
    """Yield ``(path, node)`` pairs depth-first, in document order."""
    for i, node in enumerate(forest):
        path = (*prefix, i)
        yield path, node
        yield from iter_with_paths(node.children, path)


def format_path(path: Path) -> str:
    return "/".join(str(i) for i in path)


def parse_path(text: str) -> Path | None:
    """Parse a slash-separated path such as ``"0/2/1"``.

    Returns None for empty input or any non-integer / negative part.
    """
    parts = text.strip().strip("/").split("/")
    if parts == [""]:
        return None
    try:
        path = tuple(int(p) for p in parts)
    except ValueError:
        return None
    if any(i < 0 for i in path):
        return None
    return path
