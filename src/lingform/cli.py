"""CLI entrypoint for lingform."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from lingform.analyze import build_pipeline
from lingform.config import load_config
from lingform.core import run_analysis
from lingform.errors import LingformError
from lingform.io import to_json, write_json
from lingform.logging_ import setup_logging
from lingform.models import AnalyzeRequest
from lingform.transform import TextTransformerFactory
from lingform.transliterate.base import TextType


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="lingform",
        description="Language-aware text analysis, normalization and transliteration.",
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command")

    analyze = subparsers.add_parser("analyze", help="Detect language/script and render all variants")
    analyze.add_argument("text", help="Input text")
    analyze.add_argument("--language", default="auto", help="Language code (default: auto)")
    analyze.add_argument(
        "--type",
        dest="text_types",
        action="append",
        default=None,
        help="Only include this variant key (repeatable)",
    )
    analyze.add_argument(
        "--analyzers",
        default=None,
        help="Comma-separated analyzer names (default: from config)",
    )
    analyze.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )

    transform = subparsers.add_parser("transform", help="Render one variant of a text")
    transform.add_argument("text", help="Input text")
    transform.add_argument("--language", required=True, help="Language code")
    transform.add_argument("--type", dest="text_type", required=True, help="Variant key, e.g. bgn")
    transform.add_argument(
        "--index",
        action="store_true",
        help="Transliterate the index form instead of the display form",
    )

    types = subparsers.add_parser("types", help="List variant keys")
    types.add_argument("--language", default=None, help="Only variants registered for this language")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    setup_logging(args.log_level or config.log_level)
    try:
        factory = TextTransformerFactory(target=config.display_language)
        if args.command == "analyze":
            return _analyze(args, config.analyzers, config.langdetect_seed, factory)
        if args.command == "transform":
            transformer = factory.get_transformer(args.language)
            form = "index" if args.index else "display"
            print(transformer.transform(args.text, args.text_type, form=form))
            return 0
        if args.command == "types":
            if args.language is None:
                text_types = tuple(TextType)
            else:
                text_types = factory.get_transformer(args.language).text_types
            for text_type in text_types:
                print(f"{text_type.key}\t{text_type.label}")
            return 0
    except LingformError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    parser.error(f"Unknown command: {args.command}")
    return 2


def _analyze(
    args: argparse.Namespace,
    configured: tuple[str, ...],
    seed: int,
    factory: TextTransformerFactory,
) -> int:
    names = [name.strip() for name in args.analyzers.split(",")] if args.analyzers else list(configured)
    try:
        pipeline = build_pipeline(names, langdetect_seed=seed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    request = AnalyzeRequest(text=args.text, language=args.language, text_types=args.text_types)
    with pipeline:
        report = run_analysis(request, pipeline=pipeline, factory=factory)
    if args.output:
        write_json(report, args.output)
        print(f"Wrote analysis JSON to {args.output}")
        return 0
    print(to_json(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
