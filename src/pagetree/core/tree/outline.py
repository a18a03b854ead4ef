"""Render page forests as markdown outlines."""

import io

from pagetree.core.tree.paths import format_path
from pagetree.models.node import Forest, Node, Path


def _label(node: Node) -> str:
    label = node.kind
    text = node.text
    if text:
        first_line = text.split("\n")[0]
        label += f' "{first_line[:60]}"'
    return label


def render_forest_as_markdown(
    forest: Forest,
    *,
    max_depth: int | None = None,
    show_paths: bool = True,
) -> str:
    """Render a forest as an indented markdown bullet list.

    Args:
        forest: The forest to render.
        max_depth: Max levels below the roots to include (None = unlimited).
        show_paths: Whether to append each node's index path.

    Returns:
        Markdown string with bullet-list hierarchy.
    """
    out = io.StringIO()

    def write(nodes: Forest, prefix: Path) -> None:
        for i, node in enumerate(nodes):
            path = (*prefix, i)
            depth = len(path) - 1
            indent = "    " * depth

            line = f"{indent}- {_label(node)}"
            if show_paths:
                line += f"  [{format_path(path)}]"
            out.write(line + "\n")

            if not node.children:
                continue
            # Truncation indicator when children are cut off by max_depth
            if max_depth is not None and depth >= max_depth:
                count = len(node.children)
                noun = "child" if count == 1 else "children"
                out.write(f"{indent}    - ... ({count} more {noun})\n")
                continue
            write(node.children, path)

    write(forest, ())
    return out.getvalue()
