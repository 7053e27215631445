"""
vashstatic.translator - Razor to Vash template rewriting

Rewrites C# Razor constructs (``@foreach`` loops, ``@{ }`` logic blocks,
member and helper names) into syntax the Vash template compiler accepts.
"""

from .brace_matcher import (
    close_matching_brace,
    find_matching_close,
    mark_matching_close,
    replace_all_but_last,
)
from .error_handler import RewriteWarnings
from .foreach_converter import ConversionResult, ForEachConverter, LoopHeader
from .logic_blocks import LogicBlockConverter
from .normalizer import (
    NormalizeResult,
    SyntaxNormalizer,
    convert_template_file,
    normalize_razor_syntax,
)
from .token_rewriter import TokenRewriter

__all__ = [
    "close_matching_brace",
    "find_matching_close",
    "mark_matching_close",
    "replace_all_but_last",
    "RewriteWarnings",
    "ConversionResult",
    "ForEachConverter",
    "LoopHeader",
    "LogicBlockConverter",
    "NormalizeResult",
    "SyntaxNormalizer",
    "normalize_razor_syntax",
    "convert_template_file",
    "TokenRewriter",
]
