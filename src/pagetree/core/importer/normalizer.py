"""Convert between page wire nodes and builder nodes.

Wire nodes are what pages store and export::

    {"tag": "p", "content": "Hi", "style": {"padding": "p-4"},
     "props": {...}, "events": {"onClick": "addToCart"}, "children": [...]}

Builder nodes (:class:`~pagetree.models.node.Node`) carry a minted identity,
keep text/src/events inside ``attributes`` and hold children as a field of
their own.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from pagetree.config import DEFAULT_KIND
from pagetree.core.importer.identity import IdentityMinter
from pagetree.models.node import Forest, Node
from pagetree.protocols import MinterProtocol

# Wire fields mirrored into attributes (wire name -> attribute name).
_LIFTED_FIELDS: tuple[tuple[str, str], ...] = (("content", "text"), ("src", "src"), ("events", "events"))


def _mapping(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _kind_of(external: Mapping[str, Any]) -> str:
    for key in ("type", "tag"):
        value = external.get(key)
        if isinstance(value, str) and value:
            return value
    return DEFAULT_KIND


def _children_of(external: Mapping[str, Any], props: Mapping[str, Any]) -> list[Any]:
    if "children" in external:
        raw = external["children"]
    else:
        raw = props.get("children", [])
    if not isinstance(raw, list):
        logger.warning("Ignoring non-list children of type {}", type(raw).__name__)
        return []
    return raw


def normalize(external: Mapping[str, Any], *, minter: MinterProtocol | None = None) -> Node:
    """Build a builder node (and its subtree) from a wire node.

    Every node gets a fresh identity, so normalizing the same input twice
    gives different identities. A wire ``id`` is not used as the identity; it
    is kept in ``external_id`` and written back by :func:`denormalize`.

    Malformed input never raises: a missing tag becomes ``div``, non-mapping
    ``props``/``style`` become empty and non-list children become no children.

    Args:
        external: The wire node.
        minter: Identity source; a new :class:`IdentityMinter` if omitted.
    """
    minter = minter or IdentityMinter()
    if not isinstance(external, Mapping):
        logger.warning("Cannot normalize {}, using an empty container", type(external).__name__)
        external = {}

    kind = _kind_of(external)
    props = _mapping(external.get("props"))
    raw_children = _children_of(external, props)

    attributes = {k: v for k, v in props.items() if k != "children"}
    for wire_name, attr_name in _LIFTED_FIELDS:
        value = external.get(wire_name)
        if value is not None and attr_name not in attributes:
            attributes[attr_name] = value

    styles = _mapping(external.get("style", external.get("styles")))
    wire_id = external.get("id")

    children: list[Node] = []
    for child in raw_children:
        if not isinstance(child, Mapping):
            logger.warning("Skipping child that is not a node: {!r}", child)
            continue
        children.append(normalize(child, minter=minter))

    return Node(
        id=minter.mint(kind),
        kind=kind,
        attributes=attributes,
        styles=styles,
        children=tuple(children),
        external_id=wire_id if isinstance(wire_id, str) and wire_id else None,
    )


def normalize_forest(components: Any, *, minter: MinterProtocol | None = None) -> Forest:
    """Normalize a page's component list into a forest."""
    minter = minter or IdentityMinter()
    if not isinstance(components, list):
        logger.warning("Page components are not a list, starting from an empty page")
        return ()
    return tuple(normalize(c, minter=minter) for c in components if isinstance(c, Mapping))


def denormalize(node: Node) -> dict[str, Any]:
    """Build a wire node from a builder node.

    The minted identity is dropped; the wire ``id`` the node was loaded with,
    if any, is emitted again. Output is canonical: children always go in
    ``children`` (never ``props.children``) and empty ``style``, ``props`` and
    ``children`` fields are left out.
    """
    attributes = dict(node.attributes)
    attributes.pop("children", None)

    external: dict[str, Any] = {"tag": node.kind}
    if node.external_id is not None:
        external["id"] = node.external_id
    for wire_name, attr_name in _LIFTED_FIELDS:
        if attr_name in attributes:
            external[wire_name] = attributes.pop(attr_name)
    if node.styles:
        external["style"] = dict(node.styles)
    if attributes:
        external["props"] = attributes
    if node.children:
        external["children"] = [denormalize(child) for child in node.children]
    return external


def denormalize_forest(forest: Forest) -> list[dict[str, Any]]:
    """Denormalize every root of a forest."""
    return [denormalize(node) for node in forest]
