"""Load, save and sync the persisted pages document."""

import json
from collections.abc import Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

from loguru import logger

from pagetree.core.importer.normalizer import denormalize_forest, normalize_forest
from pagetree.models.node import Forest, Page
from pagetree.protocols import MinterProtocol


def parse_pages(data: Any) -> list[Page]:
    """Parse a pages document (a JSON list of page objects).

    Page entries without a usable slug are skipped with a warning. Missing
    ``id``/``title`` default to the slug.

    Raises:
        ValueError: If the document is not a list.
    """
    if not isinstance(data, list):
        msg = f"Pages document must be a list, got {type(data).__name__}"
        raise ValueError(msg)

    pages: list[Page] = []
    for i, raw in enumerate(data):
        if not isinstance(raw, Mapping) or not isinstance(raw.get("slug"), str):
            logger.warning("Skipping page entry {} without a slug", i)
            continue
        components = raw.get("components", [])
        if not isinstance(components, list):
            logger.warning("Page {!r} has non-list components, treating as empty", raw["slug"])
            components = []
        slug = raw["slug"]
        pages.append(
            Page(
                id=str(raw.get("id", slug)),
                title=str(raw.get("title", slug)),
                slug=slug,
                components=tuple(c for c in components if isinstance(c, Mapping)),
            )
        )
    return pages


def pages_to_data(pages: Sequence[Page]) -> list[dict[str, Any]]:
    return [
        {"id": p.id, "title": p.title, "slug": p.slug, "components": list(p.components)}
        for p in pages
    ]


def load_pages(path: Path) -> list[Page]:
    """Read and parse a pages document from disk."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    pages = parse_pages(data)
    logger.debug("Loaded {} pages from {}", len(pages), path)
    return pages


def save_pages(path: Path, pages: Sequence[Page]) -> bool:
    """Write a pages document to disk.

    The file is left untouched if its contents would not change.

    Returns:
        True if the file was written.
    """
    contents = json.dumps(pages_to_data(pages), sort_keys=True, indent=4) + "\n"
    try:
        if path.read_text(encoding="utf-8") == contents:
            logger.debug("Pages file {} unchanged", path)
            return False
    except (FileNotFoundError, UnicodeDecodeError):
        pass

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    logger.debug("Wrote {} pages to {}", len(pages), path)
    return True


def find_page(pages: Sequence[Page], slug: str) -> Page | None:
    """Return the page with ``slug``, falling back to the first page."""
    for page in pages:
        if page.slug == slug:
            return page
    if pages:
        logger.debug("Page {!r} not found, falling back to {!r}", slug, pages[0].slug)
        return pages[0]
    return None


def load_forest(page: Page, *, minter: MinterProtocol | None = None) -> Forest:
    """Normalize a page's components into an editable forest."""
    return normalize_forest(list(page.components), minter=minter)


def sync_forest(pages: Sequence[Page], slug: str, forest: Forest) -> list[Page]:
    """Return new pages with the page ``slug`` holding the given forest.

    Pages other than ``slug`` are returned as they are. If no page has that
    slug the pages are returned unchanged.
    """
    components = tuple(denormalize_forest(forest))
    return [replace(p, components=components) if p.slug == slug else p for p in pages]
