"""Tests for the text rendering of trees.

The default output format is compared byte-for-byte by callers, so these
tests pin it exactly.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from treekit import (
    Tree,
    BinaryTree,
    RenderStyle,
    StyleError,
    build_tree,
    render_tree,
)


def make_sample_tree() -> Tree:
    """Create 5 with children [3, 7, 2], where 3 has [1, 6] and 7 has [8]."""
    tree = Tree(5)
    tree.add(3)
    tree.add(7)
    tree.add(2)
    tree.children[0].add(1)
    tree.children[0].add(6)
    tree.children[1].add(8)
    return tree


SAMPLE_OUTPUT = (
    "5\n"
    "├─3\n"
    "│ ├─1\n"
    "│ └─6\n"
    "├─7\n"
    "│ └─8\n"
    "└─2"
)


def test_sample_tree_output():
    """Test the canonical rendering byte-for-byte."""
    print("\n=== Test: Sample Tree Output ===")

    tree = make_sample_tree()
    output = tree.to_string()
    print(output)

    assert output == SAMPLE_OUTPUT
    assert str(tree) == SAMPLE_OUTPUT
    print("[PASS] Sample tree rendered exactly")


def test_leaf_renders_value_only():
    """Test a node without children renders as its value."""
    assert Tree(42).to_string() == "42"
    assert BinaryTree(7).to_string() == "7"


def test_last_child_block_uses_gap():
    """Test lines below the last branch get two spaces, no bar."""
    tree = build_tree("a", "b", ("c", ["d", ("e", ["f"])]))

    expected = (
        "a\n"
        "├─b\n"
        "└─c\n"
        "  ├─d\n"
        "  └─e\n"
        "    └─f"
    )
    assert tree.to_string() == expected


def test_empty_slots_are_skipped():
    """Test None holes neither render nor count as the last child."""
    tree = Tree(1, [None, Tree(2), Tree(3), None])
    assert tree.to_string() == "1\n├─2\n└─3"


def test_renderer_applies_to_root_only():
    """Test the custom renderer is not used for descendants."""
    tree = make_sample_tree()
    output = tree.to_string(lambda value: f"<{value}>")

    lines = output.split("\n")
    assert lines[0] == "<5>"
    assert lines[1:] == SAMPLE_OUTPUT.split("\n")[1:]


def test_multiline_values_are_indented():
    """Test embedded newlines in a child value keep the continuation prefix."""
    tree = Tree("root")
    tree.add("line1\nline2")
    tree.add("last")

    assert tree.to_string() == "root\n├─line1\n│ line2\n└─last"


def test_binary_tree_rendering():
    """Test binary trees render left before right, skipping empty slots."""
    print("\n=== Test: Binary Tree Rendering ===")

    tree = BinaryTree(5)
    for value in (3, 7, 2):
        tree.insert(value)

    expected = (
        "5\n"
        "├─3\n"
        "│ └─2\n"
        "└─7"
    )
    print(tree)
    assert str(tree) == expected
    print("[PASS] Binary tree rendered exactly")


def test_binary_tree_right_only_child():
    """Test a lone right child is drawn as the last branch."""
    tree = BinaryTree(1)
    tree.insert(2)
    assert str(tree) == "1\n└─2"


def test_inverted_rendering():
    """Test inversion shows up in the rendering."""
    tree = make_sample_tree()
    tree.invert()

    expected = (
        "5\n"
        "├─2\n"
        "├─7\n"
        "│ └─8\n"
        "└─3\n"
        "  ├─6\n"
        "  └─1"
    )
    assert str(tree) == expected


class TestRenderStyle:
    """Tests for alternative glyph styles."""

    def test_default_style_is_unicode(self):
        """Test the default style matches the canonical glyphs."""
        style = RenderStyle()
        assert style == RenderStyle.unicode()
        assert (style.branch, style.last_branch, style.pipe, style.gap) == ("├─", "└─", "│ ", "  ")
        assert style.validate() == []

    def test_ascii_style(self):
        """Test the ascii style through the API helper."""
        output = render_tree(make_sample_tree(), style="ascii")
        expected = (
            "5\n"
            "|-3\n"
            "| |-1\n"
            "| `-6\n"
            "|-7\n"
            "| `-8\n"
            "`-2"
        )
        assert output == expected
        assert render_tree(make_sample_tree(), style=RenderStyle.ascii()) == expected

    def test_api_default_matches_to_string(self):
        """Test the API helper defaults to the canonical output."""
        tree = make_sample_tree()
        assert render_tree(tree) == tree.to_string()
        assert render_tree(tree, style="unicode") == SAMPLE_OUTPUT

    def test_unknown_style_name(self):
        """Test an unknown style name is rejected."""
        with pytest.raises(ValueError, match="Unknown render style"):
            render_tree(Tree(1), style="fancy")

    def test_validate_reports_problems(self):
        """Test validation catches empty and misaligned glyphs."""
        errors = RenderStyle(branch="").validate()
        assert "branch cannot be empty" in errors

        errors = RenderStyle(pipe="|  ").validate()
        assert "pipe and gap must have the same width" in errors
        assert "branch and pipe must have the same width" in errors

        errors = RenderStyle(gap="\n ").validate()
        assert "gap cannot contain a newline" in errors

    def test_invalid_style_raises(self):
        """Test rendering with an invalid style fails before any output."""
        with pytest.raises(StyleError, match="Invalid render style"):
            render_tree(make_sample_tree(), style=RenderStyle(gap=""))

    def test_custom_style(self):
        """Test any consistent glyph set can be used."""
        style = RenderStyle(branch="+--", last_branch="\\--", pipe="|  ", gap="   ")
        output = render_tree(build_tree(1, (2, [3]), 4), style=style)
        assert output == "1\n+--2\n|  \\--3\n\\--4"
