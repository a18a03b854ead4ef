"""Configuration constants for pagetree."""

import os
from pathlib import Path

# Node kind used when an imported node names neither a tag nor a type.
DEFAULT_KIND: str = "div"

# Styles given to containers created from the tree view.
DEFAULT_CONTAINER_STYLES: dict[str, str] = {
    "display": "flex",
    "direction": "flex-col",
    "gap": "gap-4",
    "padding": "p-4",
    "rounded": "rounded-md",
    "bg": "bg-white",
}

# Environment variable overriding the pages file location.
PAGES_FILE_ENV: str = "PAGETREE_PAGES"

# Pages document location. First file found is used.
PAGES_FILES: list[Path] = [
    Path("pages.json"),
    Path("src/data/pages.json"),
    Path("~/.local/share/pagetree/pages.json").expanduser(),
]


def resolve_pages_file() -> Path:
    """Return the pages file to use.

    The environment override wins, then the first existing candidate. Falls
    back to the first candidate so that callers can report a useful path.
    """
    override = os.environ.get(PAGES_FILE_ENV)
    if override:
        return Path(override).expanduser()
    for candidate in PAGES_FILES:
        if candidate.is_file():
            return candidate
    return PAGES_FILES[0]
