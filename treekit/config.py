"""Rendering configuration for TreeKit.

The tree printer draws each branch with a small set of glyphs. RenderStyle
groups them so alternative styles (e.g. plain ASCII for terminals without
box-drawing support) can be swapped in without touching the renderer.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class RenderStyle:
    """Glyphs used when rendering a tree as text.

    The first line of a child block is prefixed with ``branch`` (or
    ``last_branch`` for the final child). Every following line of that block
    is prefixed with ``pipe`` (or ``gap`` for the final child) so siblings
    below stay visually connected.
    """

    branch: str = "├─"        # Non-last child, first line
    last_branch: str = "└─"   # Last child, first line
    pipe: str = "│ "          # Non-last child, continuation lines
    gap: str = "  "           # Last child, continuation lines

    # Convenience constructors for common styles

    @classmethod
    def unicode(cls) -> 'RenderStyle':
        """Box-drawing style. This is the default and the stable output format."""
        return cls()

    @classmethod
    def ascii(cls) -> 'RenderStyle':
        """Plain ASCII style for terminals without box-drawing glyphs."""
        return cls(branch="|-", last_branch="`-", pipe="| ", gap="  ")

    def validate(self) -> List[str]:
        """Validate the style for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for name in ("branch", "last_branch", "pipe", "gap"):
            glyph = getattr(self, name)
            if not isinstance(glyph, str):
                errors.append(f"{name} must be a string")
            elif not glyph:
                errors.append(f"{name} cannot be empty")
            elif "\n" in glyph:
                errors.append(f"{name} cannot contain a newline")

        if errors:
            return errors

        # Continuation prefixes must line up under their branch glyphs
        if len(self.pipe) != len(self.gap):
            errors.append("pipe and gap must have the same width")
        if len(self.branch) != len(self.pipe):
            errors.append("branch and pipe must have the same width")
        if len(self.last_branch) != len(self.gap):
            errors.append("last_branch and gap must have the same width")

        return errors


DEFAULT_STYLE = RenderStyle.unicode()
