"""Core utilities package"""

from .config import NormalizerOptions, Settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    VashStaticError,
    RewriteError,
    MalformedBlockError,
    LoopSyntaxError,
    MissingVariableWarning,
    TemplateCacheError,
    ConfigError,
)

__all__ = [
    "NormalizerOptions",
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "VashStaticError",
    "RewriteError",
    "MalformedBlockError",
    "LoopSyntaxError",
    "MissingVariableWarning",
    "TemplateCacheError",
    "ConfigError",
]
