"""
Catalog module for categorized markdown documents.

This module provides functionality for:
- Scanning category directories for markdown files
- Parsing front-matter metadata
- Normalizing one record per document
- Writing the JSON catalog (index.json)

File structure:
    <root>/
        instructions/       - Markdown documents, one category per directory
        prompts/
        chatmodes/
        index.json          - Generated catalog

Metadata format (in markdown):
    ---
    title: Python coding standards
    description: Conventions for Python files
    author: Jane Doe          # extended preset only
    created: 2024-01-15       # extended preset only
    tags: [python, style]     # extended preset only
    ---

Usage:
    from pathlib import Path
    from mdcatalog import CatalogBuilder, PRESETS

    builder = CatalogBuilder(PRESETS["awesome-copilot"], Path("."))
    stats = builder.run()
    print(stats["total_records"])
"""

from .builder import CatalogBuilder, CatalogError, count_records
from .config import PRESETS, CatalogConfig, ConfigError, get_preset, load_settings
from .metadata_parser import MetadataError, extract_metadata_block, parse_metadata
from .record import CatalogRecord, build_record
from .scanner import scan_categories, scan_category

__all__ = [
    "CatalogBuilder",
    "CatalogError",
    "count_records",
    "PRESETS",
    "CatalogConfig",
    "ConfigError",
    "get_preset",
    "load_settings",
    "MetadataError",
    "extract_metadata_block",
    "parse_metadata",
    "CatalogRecord",
    "build_record",
    "scan_categories",
    "scan_category",
]

__version__ = "1.0.0"
