"""
Literal token renames from C# Razor to Vash.

Member names and static helpers that differ between the two runtimes are
swapped by plain, case-sensitive substring replacement.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple


def default_replacements(helpers_name: str = "Html") -> List[Tuple[str, str]]:
    """
    Build the standard replacement list.

    Args:
        helpers_name: Vash helper namespace that hosts the string helpers

    Returns:
        Ordered (old, new) pairs
    """
    return [
        ("Html.Raw", "Html.raw"),
        (".Length", ".length"),
        (".Count", ".length"),
        (".Any()", ".length>0"),
        ("string.IsNullOrWhiteSpace", f"{helpers_name}.StringIsNullOrWhiteSpace"),
        ("String.IsNullOrWhiteSpace", f"{helpers_name}.StringIsNullOrWhiteSpace"),
        ("string.IsNullOrEmpty", f"{helpers_name}.StringIsNullOrEmpty"),
        ("String.IsNullOrEmpty", f"{helpers_name}.StringIsNullOrEmpty"),
    ]


class TokenRewriter:
    """Ordered list of literal substring replacements."""

    def __init__(
        self,
        helpers_name: str = "Html",
        extra_replacements: Optional[Iterable[Tuple[str, str]]] = None,
    ):
        self.replacements = default_replacements(helpers_name)
        if extra_replacements:
            self.replacements.extend(extra_replacements)

    def rewrite(self, text: str) -> str:
        for old, new in self.replacements:
            text = text.replace(old, new)
        return text
