"""Identity minting for builder nodes."""

import itertools
import uuid


class IdentityMinter:
    """Mint fresh node identities for one editing session.

    Identities look like ``"{kind}_{session}_{n}"``: a random session token
    plus a monotonic counter, so every minted identity is distinct within the
    minter and collisions across sessions are practically impossible.
    """

    def __init__(self, *, session: str | None = None) -> None:
        self.session = session or uuid.uuid4().hex[:8]
        self._counter = itertools.count(1)

    def mint(self, kind: str) -> str:
        """Return a new identity for a node of the given kind."""
        return f"{kind}_{self.session}_{next(self._counter)}"
