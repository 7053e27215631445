"""
Vash helper templates.

A default set of helpers ships with the package. Callers may pass their own
helper files: one whose file name matches a default replaces it, any other
is added to the list.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from vashstatic.core.logging import get_logger
from vashstatic.translator.normalizer import SyntaxNormalizer

from .compiler import CompileOptions, TemplateCompiler
from .paths import get_file_name

logger = get_logger(__name__)

HELPERS_DIR = Path(__file__).parent / "helpers"

DEFAULT_HELPERS = [
    "RenderPartial.vash",
    "foreach.vash",
    "LayoutContent.vash",
    "StringIsNullOrEmpty.vash",
    "StringIsNullOrWhiteSpace.vash",
]


def default_helper_paths() -> List[Path]:
    return [HELPERS_DIR / name for name in DEFAULT_HELPERS]


def resolve_helpers(custom: Optional[Iterable[str | Path]] = None) -> List[Path]:
    """
    Merge custom helper files into the default list.

    Args:
        custom: Paths to custom helper templates

    Returns:
        Helper paths; a custom helper takes the slot of the default with
        the same file name, others are appended in order
    """
    helpers = default_helper_paths()

    for path in custom or []:
        path = Path(path)
        name = get_file_name(str(path))
        for i, existing in enumerate(helpers):
            if get_file_name(str(existing)) == name:
                helpers[i] = path
                break
        else:
            helpers.append(path)

    return helpers


def load_helpers(
    paths: Iterable[Path],
    compiler: TemplateCompiler,
    options: CompileOptions,
    normalizer: Optional[SyntaxNormalizer] = None,
) -> int:
    """
    Normalize each helper template and register it with the compiler.

    Args:
        paths: Helper template files
        compiler: Template compilation engine
        options: Compile options
        normalizer: Normalizer to run over the helpers first

    Returns:
        Number of helpers loaded
    """
    normalizer = normalizer or SyntaxNormalizer()
    count = 0
    for path in paths:
        text = normalizer.normalize(path.read_text(encoding="utf-8")).text
        compiler.compile_helper(text, options)
        logger.debug("Loaded helper", extra={"extra_data": {"helper": str(path)}})
        count += 1
    return count
