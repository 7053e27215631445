"""
Razor to Vash syntax normalization.

Coordinates the rewrite passes, in this order:
1. Remove ignore spans (between the configured start/end markers)
2. Remove ``@* ... *@`` comments
3. Literal token renames (:class:`TokenRewriter`)
4. ``@foreach`` loop conversion (:class:`ForEachConverter`)

Stripping runs first so that commented-out loops and logic blocks are never
mistaken for live constructs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from vashstatic.core.config import NormalizerOptions
from vashstatic.core.logging import get_logger

from .foreach_converter import ForEachConverter
from .token_rewriter import TokenRewriter

logger = get_logger(__name__)

COMMENT_START = "@*"
COMMENT_END = "*@"


@dataclass
class NormalizeResult:
    """Result of normalizing a template."""

    text: str
    """Template text ready for the Vash compiler"""

    warnings: List[str] = field(default_factory=list)
    """Non-fatal diagnostics"""


def strip_spans(text: str, start: str, end: str) -> str:
    """
    Delete every span from ``start`` to the nearest following ``end``.

    Args:
        text: Template text
        start: Literal span opener
        end: Literal span closer

    Returns:
        Text without the spans (markers included)
    """
    pattern = re.compile(re.escape(start) + r"[\s\S]*?" + re.escape(end))
    return pattern.sub("", text)


class SyntaxNormalizer:
    """
    Makes Vash templates understand common C# Razor syntax.

    The normalizer holds no per-call state; one instance can serve any
    number of templates, from any number of threads.
    """

    def __init__(self, options: Optional[NormalizerOptions] = None):
        self.options = options or NormalizerOptions()
        self.token_rewriter = TokenRewriter(helpers_name=self.options.helpers_name)
        self.foreach_converter = ForEachConverter(helpers_name=self.options.helpers_name)

    def normalize(
        self,
        text: str,
        ignore_start: Optional[str] = None,
        ignore_end: Optional[str] = None,
    ) -> NormalizeResult:
        """
        Run every rewrite pass over ``text``.

        Args:
            text: Template contents
            ignore_start: Overrides the configured ignore-span opener
            ignore_end: Overrides the configured ignore-span closer

        Returns:
            NormalizeResult with rewritten text and warnings

        Raises:
            MalformedBlockError: If a block is never closed
            LoopSyntaxError: If a loop header cannot be parsed
        """
        text = strip_spans(
            text,
            ignore_start or self.options.ignore_start,
            ignore_end or self.options.ignore_end,
        )
        text = strip_spans(text, COMMENT_START, COMMENT_END)
        text = self.token_rewriter.rewrite(text)

        converted = self.foreach_converter.convert(text)
        return NormalizeResult(text=converted.text, warnings=converted.warnings)


def normalize_razor_syntax(text: str, options: Optional[NormalizerOptions] = None) -> str:
    """Normalize ``text`` and return only the rewritten template."""
    return SyntaxNormalizer(options).normalize(text).text


def convert_template_file(
    source_path: str | Path,
    *,
    output_path: str | Path | None = None,
    options: NormalizerOptions | None = None,
    overwrite: bool = False,
    encoding: str = "utf-8",
    normalizer: SyntaxNormalizer | None = None,
) -> tuple[Path, NormalizeResult]:
    """Normalize a Razor template file and write the Vash version."""

    source = Path(source_path)
    if not source.exists():
        raise FileNotFoundError(f"Template file not found: {source}")

    normalizer = normalizer or SyntaxNormalizer(options)
    result = normalizer.normalize(source.read_text(encoding=encoding))

    output = Path(output_path) if output_path else source.with_suffix(".vash")
    if output.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file: {output}")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.text, encoding=encoding)
    logger.info(
        "Wrote normalized template",
        extra={"extra_data": {"source": str(source), "output": str(output)}},
    )
    return output, result
