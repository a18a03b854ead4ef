"""Protocols for dependency injection in the tree editor."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MinterProtocol(Protocol):
    """Protocol for node identity generators."""

    def mint(self, kind: str) -> str:
        """Return a fresh identity for a node of the given kind."""
        ...


@runtime_checkable
class DispatcherProtocol(Protocol):
    """Protocol for the action dispatcher that rendered nodes call into."""

    def invoke(self, action: str, payload: Any = None) -> None:
        """Run the handler registered for ``action``, if any."""
        ...
