"""Tests for markdown outline rendering of forests."""

from pagetree.core.tree.outline import render_forest_as_markdown
from pagetree.models.node import Forest
from tests.unit.fakes import make_node


def _page() -> Forest:
    return (
        make_node(
            "s",
            make_node("h", kind="h1", text="Welcome\nsecond line"),
            make_node("l", make_node("i1", kind="li"), kind="ul"),
            kind="section",
        ),
        make_node("f", kind="footer", text="Bye"),
    )


def test_render_full_forest() -> None:
    md = render_forest_as_markdown(_page())
    assert md == (
        "- section  [0]\n"
        '    - h1 "Welcome"  [0/0]\n'
        "    - ul  [0/1]\n"
        "        - li  [0/1/0]\n"
        '- footer "Bye"  [1]\n'
    )


def test_render_without_paths() -> None:
    md = render_forest_as_markdown(_page(), show_paths=False)
    assert md.splitlines()[0] == "- section"
    assert "[" not in md


def test_render_with_depth_limit_shows_truncation() -> None:
    md = render_forest_as_markdown(_page(), max_depth=0)
    assert "h1" not in md
    assert "    - ... (2 more children)" in md
    # footer has no children, so no truncation marker after it
    assert md.endswith('- footer "Bye"  [1]\n')


def test_render_singular_child_noun() -> None:
    md = render_forest_as_markdown(_page(), max_depth=1)
    assert "... (1 more child)" in md
    assert "li" not in md


def test_render_empty_forest() -> None:
    assert render_forest_as_markdown(()) == ""
