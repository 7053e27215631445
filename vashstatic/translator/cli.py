"""Command line interface for the Razor to Vash normalizer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from vashstatic.core.config import NormalizerOptions, get_settings
from vashstatic.core.errors import RewriteError
from vashstatic.core.logging import setup_logging

from .normalizer import convert_template_file


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Rewrite a C# Razor template into Vash-friendly syntax."
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to the template to normalize.",
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        help="Optional destination for the normalized template (defaults to a .vash file alongside the source).",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Allow overwriting an existing output file.",
    )
    parser.add_argument(
        "--ignore-start",
        default=settings.IGNORE_START,
        help=f"Marker opening a span to delete (default: {settings.IGNORE_START}).",
    )
    parser.add_argument(
        "--ignore-end",
        default=settings.IGNORE_END,
        help=f"Marker closing a span to delete (default: {settings.IGNORE_END}).",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding to use when reading and writing files (default: utf-8).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress informational output.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)

    try:
        options = NormalizerOptions(
            ignore_start=args.ignore_start,
            ignore_end=args.ignore_end,
            helpers_name=settings.HELPERS_NAME,
        )
        written_path, result = convert_template_file(
            args.source,
            output_path=args.output,
            options=options,
            overwrite=args.overwrite,
            encoding=args.encoding,
        )
    except (FileNotFoundError, FileExistsError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (RewriteError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if not args.quiet:
        print(f"Wrote {written_path}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
