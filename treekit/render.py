"""Text rendering of trees.

Produces the familiar box-drawing layout::

    5
    ├─3
    │ ├─1
    │ └─6
    ├─7
    │ └─8
    └─2

The output format is a compatibility contract: callers compare it
byte-for-byte, so the default style must not change.
"""

from typing import Any, Callable, List, Optional, Tuple

from .config import DEFAULT_STYLE, RenderStyle
from .errors import StyleError


def render_tree(tree: Any,
                renderer: Optional[Callable[[Any], str]] = None,
                style: Optional[RenderStyle] = None) -> str:
    """Render a tree as multi-line text.

    Args:
        tree: Root node. Anything with ``value`` and ``children`` attributes,
            where ``children`` is a sequence of nodes or None holes.
        renderer: Converts the root value to text. Defaults to ``str``.
            Only the root uses it; descendants are always rendered with
            ``str`` (long-standing behaviour that existing output relies on).
        style: Glyph set to draw branches with (default box-drawing).

    Returns:
        The rendered tree, lines separated by ``\\n`` with no trailing newline.

    Raises:
        StyleError: If the style fails validation
    """
    style = style or DEFAULT_STYLE
    if style is not DEFAULT_STYLE:
        style_errors = style.validate()
        if style_errors:
            raise StyleError(f"Invalid render style: {'; '.join(style_errors)}")

    return _render_node(tree, renderer, style)


def _render_node(root: Any,
                 renderer: Optional[Callable[[Any], str]],
                 style: RenderStyle) -> str:
    lines: List[str] = []

    # Each entry: (node, prefix for its first line, prefix for its other lines, renderer)
    stack: List[Tuple[Any, str, str, Optional[Callable[[Any], str]]]] = [(root, "", "", renderer)]

    while stack:
        node, first_prefix, rest_prefix, node_renderer = stack.pop()

        value = node_renderer(node.value) if node_renderer else node.value
        value_lines = f"{value}".split("\n")
        lines.append(first_prefix + value_lines[0])
        lines.extend(rest_prefix + line for line in value_lines[1:])

        children = [child for child in node.children if child is not None]

        # Push in reverse so the first child is rendered first.
        # Descendants never see the custom renderer.
        for index in reversed(range(len(children))):
            last_child = index == len(children) - 1

            value_prefix = style.last_branch if last_child else style.branch
            child_prefix = style.gap if last_child else style.pipe

            stack.append((children[index], rest_prefix + value_prefix, rest_prefix + child_prefix, None))

    return "\n".join(lines)
