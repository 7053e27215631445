"""
vashstatic.templates - template caching and compilation pipeline

Ties the Razor normalizer to an external Vash compilation engine and a
JSON file cache of precompiled templates.
"""

from .cache import TemplateCache, load_cache
from .compiler import CompiledTemplate, CompileOptions, TemplateCompiler
from .helpers import load_helpers, resolve_helpers
from .models import ModelPrepender
from .paths import get_dir_type_from_path, get_file_name, get_module_name, template_name
from .pipeline import PrecompiledTemplate, RenderResult, TemplatePipeline

__all__ = [
    "TemplateCache",
    "load_cache",
    "CompiledTemplate",
    "CompileOptions",
    "TemplateCompiler",
    "load_helpers",
    "resolve_helpers",
    "ModelPrepender",
    "get_dir_type_from_path",
    "get_file_name",
    "get_module_name",
    "template_name",
    "PrecompiledTemplate",
    "RenderResult",
    "TemplatePipeline",
]
