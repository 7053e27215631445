"""
Conversion of Razor ``@foreach`` loops into Vash helper calls.

Rewrites::

    @foreach(var item in list) {
        <p>@item</p>
    }

into::

    @Html.foreach(list, function(item) {
        <p>@item</p>
    })

The loop header is tokenized with the Pygments C# lexer so that the
declaration, the ``in`` keyword and the iterable expression are located by
token rather than by regex. The loop's closing brace is found with the brace
matcher, after inline-logic blocks have been protected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from pygments.lexers import get_lexer_by_name

from vashstatic.core.errors import LoopSyntaxError, MalformedBlockError, MissingVariableWarning
from vashstatic.core.logging import get_logger

from .brace_matcher import CLOSE_BRACE, OPEN_BRACE, mark_matching_close
from .error_handler import RewriteWarnings, excerpt
from .logic_blocks import LogicBlockConverter

logger = get_logger(__name__)

LOOP_OPENER = re.compile(r"@foreach\s*\(")
LOOP_CLOSE_PLACEHOLDER = "++VASH_LOOP_CLOSE++"
LOOP_CALL_CLOSE = "})"
DEFAULT_LOOP_VARIABLE = "item"

_IDENTIFIER = re.compile(r"^@?[A-Za-z_]\w*$")


@dataclass
class LoopHeader:
    """Parsed ``@foreach`` header."""

    name: str
    """Per-iteration variable name"""

    iterable: str
    """Iterable expression, verbatim"""

    declared: bool = True
    """Whether the header declared the variable (``var x`` / ``Type x``)"""


@dataclass
class ConversionResult:
    """Result of converting the loops in a template."""

    text: str
    """Rewritten template text"""

    warnings: List[str] = field(default_factory=list)
    """Non-fatal diagnostics raised while converting"""


class ForEachConverter:
    """
    Rewrites ``@foreach`` loops into call-style Vash helper invocations.

    Loops are processed in text order, outer loops before the loops nested
    inside them. Each loop's body is kept verbatim; only the header and the
    loop's own closing brace change.
    """

    def __init__(
        self,
        helpers_name: str = "Html",
        logic_converter: Optional[LogicBlockConverter] = None,
    ):
        self.helpers_name = helpers_name
        self._logic = logic_converter or LogicBlockConverter()
        self._csharp_lexer = get_lexer_by_name("csharp")

    def convert(self, text: str) -> ConversionResult:
        """
        Convert every ``@foreach`` loop in ``text``.

        Args:
            text: Template text

        Returns:
            ConversionResult with the rewritten text and any warnings

        Raises:
            LoopSyntaxError: If a loop header has no ``in`` keyword
            MalformedBlockError: If a loop has no body or is never closed
        """
        if not LOOP_OPENER.search(text):
            return ConversionResult(text=text)

        diagnostics = RewriteWarnings()
        text = self._logic.protect(text)

        match = LOOP_OPENER.search(text)
        while match:
            start = match.start()
            source = self._source_text(text[start:])

            # A loop's header ends before the next loop opener
            brace = text.find(OPEN_BRACE, match.end())
            next_loop = LOOP_OPENER.search(text, match.end())
            if brace == -1 or (next_loop and brace > next_loop.start()):
                raise MalformedBlockError(
                    "@foreach has no opening brace", excerpt=excerpt(source)
                )

            header = self.parse_header(text[match.end():brace], source, diagnostics)
            opener = f"@{self.helpers_name}.foreach({header.iterable}, function({header.name}) {{"

            try:
                text, _ = mark_matching_close(text, brace + 1, LOOP_CLOSE_PLACEHOLDER)
            except MalformedBlockError as exc:
                raise MalformedBlockError(exc.message, excerpt=excerpt(source)) from exc
            text = text[:start] + opener + text[brace + 1:]

            logger.debug(
                "Rewrote @foreach loop",
                extra={"extra_data": {"name": header.name, "iterable": header.iterable}},
            )
            match = LOOP_OPENER.search(text, start + len(opener))

        text = text.replace(LOOP_CLOSE_PLACEHOLDER, LOOP_CALL_CLOSE)
        text = self._logic.restore(text)

        return ConversionResult(text=text, warnings=diagnostics.messages)

    def _source_text(self, text: str) -> str:
        """Undo placeholder substitutions so excerpts show the template as written."""
        return self._logic.restore(text.replace(LOOP_CLOSE_PLACEHOLDER, CLOSE_BRACE))

    def parse_header(
        self,
        header: str,
        block: str = "",
        diagnostics: Optional[RewriteWarnings] = None,
    ) -> LoopHeader:
        """
        Extract the loop variable and iterable from a header.

        ``header`` is the text between ``@foreach(`` and the loop's opening
        brace, e.g. ``"var item in Model.Items) "``. A header without a
        declaration (``item in list``) is accepted with a warning; the bare
        identifier, or :data:`DEFAULT_LOOP_VARIABLE` when there is none,
        becomes the variable name.

        Args:
            header: Header text, including the closing parenthesis
            block: Loop text used for error excerpts
            diagnostics: Warning tracker for missing declarations

        Returns:
            LoopHeader

        Raises:
            LoopSyntaxError: If ``in``, the closing parenthesis or the iterable
                is missing
        """
        block = block or header
        tokens = [
            (index, value)
            for index, _, value in self._csharp_lexer.get_tokens_unprocessed(header)
            if value.strip()
        ]

        in_position = next(
            (i for i, (_, value) in enumerate(tokens) if value == "in"), None
        )
        declaration = [
            value for _, value in tokens[:in_position] if value != ")"
        ]

        declared = len(declaration) >= 2 and bool(_IDENTIFIER.match(declaration[-1]))
        if declared:
            name = declaration[-1]
        else:
            name = (
                declaration[0]
                if len(declaration) == 1 and _IDENTIFIER.match(declaration[0])
                else DEFAULT_LOOP_VARIABLE
            )
            message = (
                f"@foreach header has no variable declaration, using '{name}': "
                f"{excerpt(block)!r}"
            )
            if diagnostics is not None:
                diagnostics.warn(message, MissingVariableWarning)
            else:
                logger.warning(message)

        if in_position is None:
            raise LoopSyntaxError("missing 'in' keyword", excerpt(block))

        in_index, in_value = tokens[in_position]
        close_paren = header.rfind(")")
        iterable_start = in_index + len(in_value)
        if close_paren < iterable_start:
            raise LoopSyntaxError("missing closing parenthesis", excerpt(block))

        iterable = header[iterable_start:close_paren].strip()
        if not iterable:
            raise LoopSyntaxError("missing iterable expression", excerpt(block))

        return LoopHeader(name=name, iterable=iterable, declared=declared)
