"""Action dispatch for event bindings on rendered nodes.

A node binds DOM event names to action names through its ``events``
attribute, e.g. ``{"onClick": "addToCart"}``. Whoever renders the node hands
those actions to an :class:`ActionDispatcher`, which is passed around
explicitly (one per session) rather than published as a global.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from pagetree.models.node import Node
from pagetree.protocols import DispatcherProtocol

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class ActionPayload:
    """What a rendered node reports when one of its events fires."""

    component_id: str
    component_type: str
    event: str
    props: dict[str, Any] = field(default_factory=dict)


Handler = Callable[[ActionPayload | None], None]


class ActionDispatcher:
    """Route action names to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, action: str, handler: Handler) -> None:
        self._handlers[action] = handler

    def actions(self) -> list[str]:
        return sorted(self._handlers)

    def invoke(self, action: str, payload: ActionPayload | None = None) -> None:
        """Run the handler for ``action``.

        Unknown actions are logged and otherwise ignored.
        """
        handler = self._handlers.get(action)
        if handler is None:
            logger.info("Unhandled action {!r}: {!r}", action, payload)
            return
        logger.debug("Dispatching action {!r}", action)
        handler(payload)


def dispatch_event(dispatcher: DispatcherProtocol, node: Node, event: str) -> bool:
    """Fire the action bound to ``event`` on ``node``, if there is one.

    Returns:
        True if the node binds an action to the event.
    """
    events = node.attributes.get("events")
    if not isinstance(events, dict):
        return False
    action = events.get(event)
    if not isinstance(action, str) or not action:
        return False
    props = {k: v for k, v in node.attributes.items() if k != "events"}
    payload = ActionPayload(component_id=node.id, component_type=node.kind, event=event, props=props)
    dispatcher.invoke(action, payload)
    return True


@dataclass
class Storefront:
    """Application state the stock builder actions operate on."""

    cart: list[dict[str, Any]] = field(default_factory=list)
    location: str | None = None
    mode: str = "builder"


def _product_id(payload: ActionPayload | None) -> Any:
    if payload is None:
        return None
    props = payload.props
    bindings = props.get("bindings")
    if isinstance(bindings, dict) and bindings.get("productId"):
        return bindings["productId"]
    return props.get("productId") or props.get("id")


def default_dispatcher(store: Storefront) -> ActionDispatcher:
    """Create a dispatcher with the builder's stock actions bound to ``store``."""
    dispatcher = ActionDispatcher()

    def add_to_cart(payload: ActionPayload | None) -> None:
        product_id = _product_id(payload)
        if product_id:
            store.cart.append({"id": product_id})

    def remove_from_cart(payload: ActionPayload | None) -> None:
        if payload is None:
            return
        item_id = payload.props.get("id") or payload.props.get("productId")
        if item_id:
            store.cart[:] = [item for item in store.cart if item.get("id") != item_id]

    def go_to_checkout(payload: ActionPayload | None) -> None:
        store.location = "/checkout"

    def navigate_to(payload: ActionPayload | None) -> None:
        href = payload.props.get("href") if payload is not None else None
        if not isinstance(href, str) or not href:
            return
        if href.startswith("#/"):
            store.location = href
        elif _ABSOLUTE_URL.match(href):
            store.location = href
        else:
            # Anything else is a page slug.
            prefix = "public" if store.mode == "public" else "builder"
            store.location = f"#/{prefix}/{href.lstrip('/')}"

    dispatcher.register("addToCart", add_to_cart)
    dispatcher.register("removeFromCart", remove_from_cart)
    dispatcher.register("goToCheckout", go_to_checkout)
    dispatcher.register("navigateTo", navigate_to)
    return dispatcher
