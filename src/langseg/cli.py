#!/usr/bin/env python3
"""Split mixed-language text into per-language segments.

Usage:
    langseg [OPTIONS] [TEXT]

Examples:
    langseg "Καλημέρα hello κόσμος"
    langseg --cld2 --expect en --expect de "Hello und willkommen"
    echo "Привет world" | langseg --json
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import SegmenterConfig, build_segmenter, load_config


def _configure_logging(verbose: bool) -> None:
    debug = verbose or os.environ.get("LANGSEG_DEBUG", "").lower() in ("1", "true", "yes")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def _apply_overrides(config: SegmenterConfig, args: argparse.Namespace) -> SegmenterConfig:
    overrides = {}
    if args.threshold is not None:
        overrides["threshold"] = args.threshold
    if args.default_lang:
        overrides["default_lang"] = args.default_lang
    if args.expect:
        overrides["expected_languages"] = args.expect
    if args.cld2:
        overrides["backend"] = "cld2"
    if not overrides:
        return config
    return SegmenterConfig(**{**config.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Word-level language segmentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to segment (read from stdin if omitted)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config JSON (default: $LANGSEG_CONFIG or local/langseg.json)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Minimum detection confidence (default: from config)",
    )
    parser.add_argument(
        "--default-lang",
        help="Language for low-confidence tokens (default: from config)",
    )
    parser.add_argument(
        "--expect",
        action="append",
        metavar="LANG",
        help="Expected language (repeatable)",
    )
    parser.add_argument(
        "--cld2",
        action="store_true",
        help="Use CLD2 as the external detector",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print segments as a JSON array",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )
    args = parser.parse_args(argv)

    load_dotenv()
    _configure_logging(args.verbose)

    try:
        config = _apply_overrides(load_config(args.config), args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    text = " ".join(args.text) if args.text else sys.stdin.read()

    segmenter = build_segmenter(config)
    segments = asyncio.run(segmenter.segment(text, config.segment_options()))

    if args.json:
        print(json.dumps([dataclasses.asdict(seg) for seg in segments], ensure_ascii=False))
    else:
        for seg in segments:
            print(f"[{seg.lang}] {seg.text!r}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
