"""
Package exceptions.

Defines the exception hierarchy raised by the rewriter and the template
pipeline. Every exception carries a human-readable message and a details
dict suitable for structured logging.
"""

from typing import Any, Dict, Optional


class VashStaticError(Exception):
    """Base exception for vashstatic errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Rewrite errors

class RewriteError(VashStaticError):
    """Raised when template text cannot be rewritten"""

    def __init__(self, message: str, excerpt: str = ""):
        self.excerpt = excerpt
        super().__init__(message, details={"excerpt": excerpt})


class MalformedBlockError(RewriteError):
    """Raised when an opened block has no matching closing brace"""


class LoopSyntaxError(RewriteError, SyntaxError):
    """Raised when a loop header cannot be parsed, e.g. it lacks ``in``"""

    def __init__(self, reason: str, excerpt: str):
        super().__init__(f"Invalid @foreach header ({reason}) near: {excerpt!r}", excerpt=excerpt)


class MissingVariableWarning(UserWarning):
    """Loop header has no variable declaration; a default name was used"""


# Template pipeline errors

class TemplateCacheError(VashStaticError):
    """Raised when the template cache file cannot be used"""

    def __init__(self, cache_path: str, error: str):
        super().__init__(
            message=f"Template cache '{cache_path}' is unusable: {error}",
            details={"cache_path": cache_path, "error": error}
        )


class ConfigError(VashStaticError):
    """Raised for invalid pipeline options"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message=message, details=details)
