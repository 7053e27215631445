"""
vashstatic - C# Razor syntax for Vash templates

Rewrites Razor-style templates into Vash syntax and manages a cache of
precompiled templates for static page rendering.
"""

__version__ = "0.1.0"

from .core.config import NormalizerOptions, Settings, get_settings
from .core.errors import LoopSyntaxError, MalformedBlockError, MissingVariableWarning
from .translator import NormalizeResult, SyntaxNormalizer, normalize_razor_syntax

__all__ = [
    "NormalizerOptions",
    "Settings",
    "get_settings",
    "LoopSyntaxError",
    "MalformedBlockError",
    "MissingVariableWarning",
    "NormalizeResult",
    "SyntaxNormalizer",
    "normalize_razor_syntax",
]
