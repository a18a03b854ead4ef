"""Page tree editing engine and page JSON bridge."""

from pagetree.core.importer.identity import IdentityMinter
from pagetree.core.importer.normalizer import denormalize, normalize
from pagetree.core.tree.mutators import insert_at_path, remove_at_path
from pagetree.core.tree.operations import indent, merge, move_down, move_up, outdent, reorder
from pagetree.core.tree.paths import find_path
from pagetree.models.node import Forest, Node, Path

__all__ = [
    "Forest",
    "IdentityMinter",
    "Node",
    "Path",
    "denormalize",
    "find_path",
    "indent",
    "insert_at_path",
    "merge",
    "move_down",
    "move_up",
    "normalize",
    "outdent",
    "remove_at_path",
    "reorder",
]
