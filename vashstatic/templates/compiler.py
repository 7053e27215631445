"""
Boundary to the template compilation engine.

The engine that turns normalized Vash text into a render function lives
outside this package. These protocols describe what the pipeline needs from
it; any object with matching methods can be plugged in.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from vashstatic.core.config import Settings, get_settings


class CompileOptions(BaseModel):
    """Options handed to the compiler with every template."""

    model_name: str = "Model"
    helpers_name: str = "Html"
    debug: bool = False
    debug_parser: bool = False

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, debug: bool = False) -> "CompileOptions":
        settings = settings or get_settings()
        debug = debug or settings.DEBUG
        return cls(
            model_name=settings.MODEL_NAME,
            helpers_name=settings.HELPERS_NAME,
            debug=debug,
            debug_parser=debug,
        )


@runtime_checkable
class CompiledTemplate(Protocol):
    """A compiled render function."""

    def __call__(self, model: Any = None) -> str:
        ...

    def to_client_string(self) -> str:
        """Serialized form, stored in the template cache."""
        ...


@runtime_checkable
class TemplateCompiler(Protocol):
    """Template compilation engine."""

    def compile(self, text: str, options: CompileOptions) -> CompiledTemplate:
        ...

    def compile_helper(self, text: str, options: CompileOptions) -> None:
        ...

    def load(self, client_string: str) -> CompiledTemplate:
        """Rebuild a render function from its cached client string."""
        ...

    def install(self, name: str, template: CompiledTemplate) -> None:
        """Register a template under ``name`` so partials and layouts can find it."""
        ...
