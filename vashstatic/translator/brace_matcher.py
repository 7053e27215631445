"""
Closing-brace matching for brace-delimited template blocks.

The matcher works on raw text: it is handed everything after an opening
brace that the caller has already consumed, and finds the ``}`` that brings
the nesting depth back to zero. Inner ``if``/``foreach``/object-literal
blocks are skipped over, and sibling blocks at the same level each resolve
to their own closer.

The scan is a flat loop with an integer depth counter, so very deeply nested
input cannot exhaust the interpreter's recursion limit.
"""

from __future__ import annotations

from vashstatic.core.errors import MalformedBlockError

from .error_handler import excerpt

OPEN_BRACE = "{"
CLOSE_BRACE = "}"


def find_matching_close(text: str, start: int = 0) -> int:
    """
    Find the closing brace that balances an already-consumed opener.

    Args:
        text: Template text
        start: Index just after the consumed opening brace (depth 1)

    Returns:
        Index of the balancing ``}`` in ``text``

    Raises:
        MalformedBlockError: If ``text`` has no ``}`` after ``start`` or
            runs out before the depth returns to zero
    """
    if text.find(CLOSE_BRACE, start) == -1:
        raise MalformedBlockError(
            "Block has no closing brace", excerpt=excerpt(text[start:])
        )

    depth = 1
    for index in range(start, len(text)):
        char = text[index]
        if char == OPEN_BRACE:
            depth += 1
        elif char == CLOSE_BRACE:
            depth -= 1
            if depth == 0:
                return index

    raise MalformedBlockError(
        f"Block is missing {depth} closing brace(s)", excerpt=excerpt(text[start:])
    )


def close_matching_brace(text: str, placeholder: str, force_first: bool = False) -> str:
    """
    Substitute a placeholder for the brace that closes the current block.

    ``text`` starts just after an opening brace. Without ``force_first``
    only the balancing brace is replaced, and when that brace is also the
    first ``}`` in the text (no nesting at all) the text is left untouched.
    With ``force_first`` every ``}`` up to and including the balancing one
    is replaced; callers then collapse the extras with
    :func:`replace_all_but_last`.

    Args:
        text: Text after the opening brace
        placeholder: Token to put in place of the matching brace
        force_first: Always substitute, starting from the first ``}``

    Returns:
        Text with the matching brace replaced

    Raises:
        MalformedBlockError: If the block is never closed
    """
    index = find_matching_close(text)

    if force_first:
        head = text[:index + 1].replace(CLOSE_BRACE, placeholder)
        return head + text[index + 1:]

    if index == text.find(CLOSE_BRACE):
        return text

    return text[:index] + placeholder + text[index + 1:]


def mark_matching_close(text: str, start: int, placeholder: str) -> tuple[str, int]:
    """
    Mark the closer of the block whose body begins at ``start``.

    Every closer up to the balancing one is substituted, then all but the
    last substitution are reverted, leaving exactly one placeholder.

    Args:
        text: Template text
        start: Index just after the block's opening brace
        placeholder: Token marking the block's end

    Returns:
        (updated_text, placeholder_index)

    Raises:
        MalformedBlockError: If the block is never closed
    """
    close = find_matching_close(text, start)

    block = close_matching_brace(text[start:close + 1], placeholder, force_first=True)
    block = replace_all_but_last(block, placeholder, CLOSE_BRACE)

    return text[:start] + block + text[close + 1:], start + len(block) - len(placeholder)


def replace_all_but_last(text: str, token: str, replacement: str) -> str:
    """
    Replace every occurrence of ``token`` except the final one.

    Args:
        text: Text to search
        token: Substring to replace
        replacement: Substitute for all but the last occurrence

    Returns:
        Updated text; unchanged when ``token`` occurs at most once
    """
    last = text.rfind(token)
    if last == -1:
        return text
    return text[:last].replace(token, replacement) + text[last:]
