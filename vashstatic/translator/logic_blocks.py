"""
Protection of inline-logic blocks (``@{ ... }``).

Before loops are located, every inline-logic block has its opener and its
true closing brace swapped for placeholder tokens, so that later scans do not
mistake the block's braces for loop boundaries. :meth:`restore` puts them
back afterwards.
"""

from __future__ import annotations

from .brace_matcher import CLOSE_BRACE, mark_matching_close

LOGIC_OPENER = "@{"
LOGIC_OPEN_PLACEHOLDER = "++VASH_LOGIC_OPEN++"
LOGIC_CLOSE_PLACEHOLDER = "++VASH_LOGIC_CLOSE++"


class LogicBlockConverter:
    """
    Swaps inline-logic delimiters for placeholders and back.

    Only the outermost closing brace of each block is replaced; braces of
    ``if``/``for`` statements inside the block stay literal.
    """

    def __init__(
        self,
        open_placeholder: str = LOGIC_OPEN_PLACEHOLDER,
        close_placeholder: str = LOGIC_CLOSE_PLACEHOLDER,
    ):
        self.open_placeholder = open_placeholder
        self.close_placeholder = close_placeholder

    def protect(self, text: str) -> str:
        """
        Replace each ``@{`` and its matching ``}`` with placeholders.

        Blocks are handled in text order. A block nested in another one is
        still found, because the outer block's opener is replaced before the
        search moves on.

        Args:
            text: Template text

        Returns:
            Text with every inline-logic block delimited by placeholders

        Raises:
            MalformedBlockError: If a block is never closed
        """
        position = text.find(LOGIC_OPENER)
        if position == -1:
            return text

        while position != -1:
            body_start = position + len(LOGIC_OPENER)
            text, _ = mark_matching_close(text, body_start, self.close_placeholder)

            text = text[:position] + self.open_placeholder + text[body_start:]
            position = text.find(LOGIC_OPENER, position + len(self.open_placeholder))

        return text

    def restore(self, text: str) -> str:
        """
        Reverse :meth:`protect`.

        Args:
            text: Text produced by :meth:`protect`

        Returns:
            Text with the original ``@{`` and ``}`` delimiters
        """
        return (
            text.replace(self.open_placeholder, LOGIC_OPENER)
            .replace(self.close_placeholder, CLOSE_BRACE)
        )
