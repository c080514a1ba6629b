"""
Catalog builder.

Scans the configured category directories, reads the front matter of every
markdown file and writes one JSON catalog:

    {
      "generated": "2024-05-01T12:00:00.000Z",
      "instructions": [{"filename": ..., "title": ..., ...}, ...],
      "prompts": [...],
      "chatmodes": []
    }

The catalog is rebuilt from scratch on every run and replaces the previous
file in one step.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import CatalogConfig
from .metadata_parser import extract_metadata_block
from .record import CatalogRecord, build_record
from .scanner import scan_categories


logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """Exception raised when the catalog cannot be built or written."""
    pass


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with milliseconds and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def count_records(catalog: Dict[str, Any]) -> int:
    """Count records across all category lists of a catalog."""
    return sum(len(value) for value in catalog.values() if isinstance(value, list))


class CatalogBuilder:
    """Builds the document catalog for one corpus root."""

    def __init__(
        self,
        config: CatalogConfig,
        root: Path,
        output_path: Optional[Path] = None,
        build_time: Optional[datetime] = None,
    ):
        """Initialize catalog builder.

        Args:
            config: Categories and field projection
            root: Directory holding the category directories
            output_path: Catalog file (default: <root>/<config.output_name>)
            build_time: Timestamp for 'generated' and default 'created'
                (default: now, UTC)
        """
        self.config = config
        self.root = Path(root)
        self.output_path = Path(output_path) if output_path else self.root / config.output_name
        self.build_time = build_time or datetime.now(timezone.utc)

    def collect_records(self) -> Dict[str, List[CatalogRecord]]:
        """Scan and parse every document, grouped by category.

        Raises:
            CatalogError: If a category directory or document cannot be read
        """
        try:
            files = scan_categories(self.root, self.config.categories, self.config.extension)
        except OSError as exc:
            raise CatalogError(f"Cannot list categories under {self.root}: {exc}") from exc
        records: Dict[str, List[CatalogRecord]] = {}

        for category, filenames in files.items():
            records[category] = []
            for filename in filenames:
                metadata = self._read_metadata(self.root / category / filename)
                records[category].append(
                    build_record(
                        category,
                        filename,
                        metadata,
                        self.build_time,
                        extension=self.config.extension,
                    )
                )
            logger.info("%s: %d documents", category, len(records[category]))

        return records

    def _read_metadata(self, path: Path) -> Dict:
        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogError(f"Cannot read {path}: {exc}") from exc

        metadata, _ = extract_metadata_block(content, source=str(path))
        return metadata

    def build(self) -> Dict[str, Any]:
        """Build the catalog mapping without writing it."""
        catalog: Dict[str, Any] = {}
        if self.config.include_generated:
            catalog["generated"] = format_timestamp(self.build_time)

        for category, records in self.collect_records().items():
            catalog[category] = [record.to_dict(self.config) for record in records]

        return catalog

    def write(self, catalog: Dict[str, Any]) -> None:
        """Write the catalog, replacing any previous file.

        The JSON goes to a temporary file next to the output first, so the
        output path either keeps its old content or holds the full catalog.

        Raises:
            CatalogError: If the output cannot be written
        """
        payload = json.dumps(catalog, indent=2, ensure_ascii=False) + "\n"
        target_dir = self.output_path.parent

        tmp_name = None
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.output_path.name}.", suffix=".tmp", dir=target_dir
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            # mkstemp creates 0600; keep the old file's mode or follow the umask
            os.chmod(tmp_name, self._output_mode())
            os.replace(tmp_name, self.output_path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CatalogError(f"Cannot write {self.output_path}: {exc}") from exc

    def _output_mode(self) -> int:
        try:
            return stat.S_IMODE(self.output_path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def run(self) -> Dict[str, Any]:
        """Build and write the catalog.

        Returns:
            Dictionary with build statistics

        Example:
            >>> builder = CatalogBuilder(PRESETS["awesome-copilot"], Path("."))
            >>> stats = builder.run()
            >>> print(f"Generated {stats['output_file']} with {stats['total_records']} total items")
        """
        catalog = self.build()
        self.write(catalog)

        by_category = {
            category: len(value)
            for category, value in catalog.items()
            if isinstance(value, list)
        }
        stats = {
            "total_records": count_records(catalog),
            "by_category": by_category,
            "output_file": str(self.output_path),
            "timestamp": format_timestamp(self.build_time),
        }
        logger.info("Wrote %s", self.output_path)
        return stats
