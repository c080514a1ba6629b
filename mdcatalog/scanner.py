"""
Directory scanner for the catalog builder.

Each category is a directory directly under the corpus root. Only files
sitting directly in that directory and ending with the markdown extension
are picked up; subdirectories are ignored.

File order is whatever the OS directory listing returns. That is stable for
an unchanged directory on one filesystem but is not guaranteed to match
across filesystems.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, List


def scan_category(root: Path, category: str, extension: str = ".md") -> List[str]:
    """List markdown filenames in one category directory.

    Args:
        root: Corpus root directory
        category: Category name (directory name under root)
        extension: Case-sensitive filename suffix to keep

    Returns:
        Filenames in directory listing order, or an empty list if the
        category directory does not exist
    """
    category_dir = Path(root) / category
    if not category_dir.is_dir():
        return []

    with os.scandir(category_dir) as entries:
        return [
            entry.name
            for entry in entries
            if entry.name.endswith(extension) and entry.is_file()
        ]


def scan_categories(root: Path, categories: Iterable[str], extension: str = ".md") -> Dict[str, List[str]]:
    """Scan every category, keeping the declared category order."""
    return {category: scan_category(root, category, extension) for category in categories}
