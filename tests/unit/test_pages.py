"""Tests for loading, saving and syncing the pages document."""

import json
from pathlib import Path

import pytest

from pagetree.core.pages import (
    find_page,
    load_forest,
    load_pages,
    pages_to_data,
    parse_pages,
    save_pages,
    sync_forest,
)
from pagetree.core.tree.operations import move_down
from pagetree.models.node import Page
from tests.unit.fakes import ABOUT_PAGE, HOME_PAGE, FakeMinter


def test_parse_pages_reads_fields() -> None:
    pages = parse_pages([HOME_PAGE, ABOUT_PAGE])
    assert [p.slug for p in pages] == ["home", "about"]
    assert pages[0].title == "Home"
    assert len(pages[0].components) == 2


def test_parse_pages_rejects_non_list() -> None:
    with pytest.raises(ValueError, match="must be a list"):
        parse_pages({"pages": []})


def test_parse_pages_skips_bad_entries(log_messages: list[str]) -> None:
    pages = parse_pages(["junk", {"title": "No slug"}, {"slug": "ok", "components": "bad"}])
    assert len(pages) == 1
    assert pages[0] == Page(id="ok", title="ok", slug="ok", components=())
    assert any("without a slug" in m for m in log_messages)


def test_load_and_save_round_trip(pages_file: Path, tmp_path: Path) -> None:
    pages = load_pages(pages_file)
    out = tmp_path / "out" / "pages.json"
    assert save_pages(out, pages) is True
    assert json.loads(out.read_text()) == [HOME_PAGE, ABOUT_PAGE]
    assert out.read_text().endswith("]\n")


def test_save_unchanged_does_not_rewrite(tmp_path: Path) -> None:
    out = tmp_path / "pages.json"
    pages = parse_pages([ABOUT_PAGE])
    assert save_pages(out, pages) is True
    assert save_pages(out, pages) is False


def test_load_pages_rejects_bad_document(tmp_path: Path) -> None:
    path = tmp_path / "pages.json"
    path.write_text('{"slug": "home"}')
    with pytest.raises(ValueError):
        load_pages(path)


def test_find_page_falls_back_to_first() -> None:
    pages = parse_pages([HOME_PAGE, ABOUT_PAGE])
    assert find_page(pages, "about") is pages[1]
    assert find_page(pages, "nope") is pages[0]
    assert find_page([], "home") is None


def test_load_forest_normalizes_components(minter: FakeMinter) -> None:
    page = parse_pages([HOME_PAGE])[0]
    forest = load_forest(page, minter=minter)
    assert [n.kind for n in forest] == ["section", "footer"]
    assert forest[0].children[0].attributes == {"text": "Welcome"}


def test_sync_forest_replaces_only_target_page(minter: FakeMinter) -> None:
    pages = parse_pages([HOME_PAGE, ABOUT_PAGE])
    forest = load_forest(pages[0], minter=minter)
    edited = move_down(forest, forest[0].id)

    synced = sync_forest(pages, "home", edited)
    assert synced[1] is pages[1]
    assert [c["tag"] for c in synced[0].components] == ["footer", "section"]
    # Input pages are left alone
    assert [c["tag"] for c in pages[0].components] == ["section", "footer"]


def test_sync_forest_unknown_slug_changes_nothing(minter: FakeMinter) -> None:
    pages = parse_pages([HOME_PAGE])
    assert sync_forest(pages, "missing", ()) == pages


def test_unedited_forest_syncs_back_to_same_data(minter: FakeMinter) -> None:
    pages = parse_pages([HOME_PAGE, ABOUT_PAGE])
    forest = load_forest(pages[0], minter=minter)
    assert pages_to_data(sync_forest(pages, "home", forest)) == [HOME_PAGE, ABOUT_PAGE]


def test_sync_keeps_wire_ids_after_an_edit(minter: FakeMinter) -> None:
    page = Page(id="p1", title="Home", slug="home", components=({"id": "hero", "tag": "section"}, {"id": "cta", "tag": "button"}))
    forest = load_forest(page, minter=minter)
    (synced,) = sync_forest([page], "home", move_down(forest, forest[0].id))
    assert [c["id"] for c in synced.components] == ["cta", "hero"]
