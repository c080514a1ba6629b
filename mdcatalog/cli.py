#!/usr/bin/env python3
"""
Generate index.json from categorized markdown documents.

Usage:
    generate-index
    generate-index --preset extended
    generate-index --root docs --output docs/index.json --verbose
    python -m mdcatalog
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .builder import CatalogBuilder, CatalogError
from .config import PRESETS, ConfigError, load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-index",
        description="Build a JSON catalog from categorized markdown files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Catalog instructions/, prompts/ and chatmodes/ in the current directory
    generate-index

    # Richer records (category, author, created, tags)
    generate-index --preset extended

    # Another corpus root
    generate-index --root path/to/corpus
        """
    )

    parser.add_argument(
        "--root",
        type=Path,
        help="Directory holding the category directories (default: current directory)"
    )

    parser.add_argument(
        "--output",
        type=Path,
        help="Catalog file to write (default: <root>/index.json)"
    )

    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="Category set and field projection (default: awesome-copilot)"
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        help="Environment file to load (default: ./.env if present)"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show per-category counts"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = load_settings(
            env_file=args.env_file,
            preset=args.preset,
            root=args.root,
            output=args.output,
        )
        builder = CatalogBuilder(settings.config, settings.root, settings.output_path)
        stats = builder.run()
    except (CatalogError, ConfigError) as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    print(f"✓ Generated {builder.output_path.name} with {stats['total_records']} total items")
    return 0


if __name__ == "__main__":
    sys.exit(main())
