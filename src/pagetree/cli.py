"""CLI for pagetree (inspect and edit the component tree of a pages file)."""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from pagetree.config import resolve_pages_file
from pagetree.core.importer.identity import IdentityMinter
from pagetree.core.pages import find_page, load_forest, load_pages, save_pages, sync_forest
from pagetree.core.tree import operations
from pagetree.core.tree.outline import render_forest_as_markdown
from pagetree.core.tree.paths import get_at_path, parse_path
from pagetree.logging_config import configure_logging
from pagetree.models.node import Forest, Page

app = typer.Typer(help="pagetree: inspect and restructure page component trees.")

PagesFileOption = Annotated[
    Path | None,
    typer.Option("--pages-file", "-p", help="Pages JSON document"),
]
SlugOption = Annotated[
    str,
    typer.Option("--page", "-P", help="Slug of the page to edit (default: first page)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load(pages_file: Path | None) -> tuple[Path, list[Page]]:
    """Load the pages document, exiting with an error if it is unusable."""
    path = pages_file or resolve_pages_file()
    if not path.is_file():
        logger.error("Pages file not found: {}", path)
        raise typer.Exit(1)
    try:
        pages = load_pages(path)
    except ValueError as e:
        logger.error("Cannot read pages file {}: {}", path, e)
        raise typer.Exit(1) from e
    if not pages:
        logger.error("Pages file {} has no pages", path)
        raise typer.Exit(1)
    return path, pages


def _find_page(pages: list[Page], slug: str) -> Page:
    """Pick the page to work on, exiting with an error if there is none."""
    page = find_page(pages, slug)
    if page is None:
        logger.error("No page to work on for slug {!r}", slug)
        raise typer.Exit(1)
    return page


def _resolve_id(forest: Forest, path_text: str) -> str:
    """Turn a ``0/1/2`` style path into the identity of the node it names."""
    path = parse_path(path_text)
    node = get_at_path(forest, path) if path is not None else None
    if node is None:
        typer.echo(f"No node at path '{path_text}'.")
        raise typer.Exit(1)
    return node.id


def _edit(
    pages_file: Path | None,
    slug: str,
    apply: Callable[[Forest], Forest],
) -> None:
    """Load one page as a forest, apply an edit, and save it back."""
    path, pages = _load(pages_file)
    page = _find_page(pages, slug)
    forest = load_forest(page, minter=IdentityMinter())
    edited = apply(forest)
    if edited == forest:
        typer.echo("Nothing changed.")
        return
    save_pages(path, sync_forest(pages, page.slug, edited))
    typer.echo(render_forest_as_markdown(edited), nl=False)


@app.command(name="pages")
def list_pages(pages_file: PagesFileOption = None) -> None:
    """List the pages in the document."""
    _path, pages = _load(pages_file)
    typer.echo(f"{len(pages)} pages:\n")
    for page in pages:
        typer.echo(f"  {page.title} (/{page.slug}) - {len(page.components)} root components")


@app.command()
def show(
    slug: str = typer.Argument("", help="Page slug (default: first page)"),
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max depth levels to render"),
    ] = None,
    pages_file: PagesFileOption = None,
) -> None:
    """Show a page's component tree with node paths."""
    _path, pages = _load(pages_file)
    page = _find_page(pages, slug)
    forest = load_forest(page)
    md = render_forest_as_markdown(forest, max_depth=max_depth)
    typer.echo(md if md else f"Page '{page.slug}' is empty.", nl=not md)


@app.command(name="move-up")
def move_up(
    path: str = typer.Argument(..., help="Node path, e.g. 0/2"),
    slug: SlugOption = "",
    pages_file: PagesFileOption = None,
) -> None:
    """Move a node before its previous sibling."""
    _edit(pages_file, slug, lambda f: operations.move_up(f, _resolve_id(f, path)))


@app.command(name="move-down")
def move_down(
    path: str = typer.Argument(..., help="Node path, e.g. 0/2"),
    slug: SlugOption = "",
    pages_file: PagesFileOption = None,
) -> None:
    """Move a node after its next sibling."""
    _edit(pages_file, slug, lambda f: operations.move_down(f, _resolve_id(f, path)))


@app.command()
def indent(
    path: str = typer.Argument(..., help="Node path, e.g. 0/2"),
    slug: SlugOption = "",
    pages_file: PagesFileOption = None,
) -> None:
    """Make a node the last child of its previous sibling."""
    _edit(pages_file, slug, lambda f: operations.indent(f, _resolve_id(f, path)))


@app.command()
def outdent(
    path: str = typer.Argument(..., help="Node path, e.g. 0/2"),
    slug: SlugOption = "",
    pages_file: PagesFileOption = None,
) -> None:
    """Move a node out of its parent, right after it."""
    _edit(pages_file, slug, lambda f: operations.outdent(f, _resolve_id(f, path)))


@app.command()
def delete(
    path: str = typer.Argument(..., help="Node path, e.g. 0/2"),
    slug: SlugOption = "",
    pages_file: PagesFileOption = None,
) -> None:
    """Delete a node and its subtree."""
    _edit(pages_file, slug, lambda f: operations.delete_node(f, _resolve_id(f, path)))


@app.command()
def merge(
    source: str = typer.Argument(..., help="Path of the node to move"),
    target: str = typer.Argument(..., help="Path of the new parent"),
    slug: SlugOption = "",
    pages_file: PagesFileOption = None,
) -> None:
    """Move a node to be the last child of another node."""
    _edit(
        pages_file,
        slug,
        lambda f: operations.merge(f, _resolve_id(f, source), _resolve_id(f, target)),
    )


@app.command()
def reorder(
    source: str = typer.Argument(..., help="Path of the node to move"),
    target: str = typer.Argument(..., help="Path of the node to drop next to"),
    zone: str = typer.Option("before", "--zone", "-z", help="'before' or 'after' the target"),
    slug: SlugOption = "",
    pages_file: PagesFileOption = None,
) -> None:
    """Move a node directly before or after another node."""
    if zone not in ("before", "after"):
        typer.echo(f"Invalid zone '{zone}', expected 'before' or 'after'.")
        raise typer.Exit(1)
    _edit(
        pages_file,
        slug,
        lambda f: operations.reorder(
            f, _resolve_id(f, source), _resolve_id(f, target), "after" if zone == "after" else "before"
        ),
    )


@app.command(name="add-container")
def add_container(
    path: str = typer.Argument(..., help="Path of the parent node"),
    slug: SlugOption = "",
    pages_file: PagesFileOption = None,
) -> None:
    """Append an empty container to a node."""
    minter = IdentityMinter()
    _edit(
        pages_file,
        slug,
        lambda f: operations.add_container(f, _resolve_id(f, path), minter=minter),
    )
