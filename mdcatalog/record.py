"""
Catalog records.

A record is the normalized view of one document. The derived fields
(filename, link, category) come from where the file sits on disk; metadata
only feeds title, description and the enrichment fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .config import NO_DESCRIPTION, UNKNOWN_AUTHOR, CatalogConfig


@dataclass
class CatalogRecord:
    """Represents one document in the catalog."""
    filename: str
    title: str
    description: str
    link: str
    category: str
    author: str = UNKNOWN_AUTHOR
    created: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self, config: CatalogConfig) -> Dict[str, Any]:
        """Project the record onto the fields the config emits."""
        description = f'"{self.description}"' if config.quote_description else self.description
        data: Dict[str, Any] = {
            "filename": self.filename,
            "title": self.title,
            "description": description,
            "link": self.link,
        }
        if config.include_category:
            data["category"] = self.category
        if config.include_enrichment:
            data["author"] = self.author
            data["created"] = self.created
            data["tags"] = list(self.tags)
        return data


def _as_text(value: Any) -> Optional[str]:
    """Turn a YAML scalar into a string, or None if it is missing/empty."""
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        text = value.isoformat()
    elif isinstance(value, (list, dict)):
        return None
    else:
        text = str(value)
    return text if text.strip() else None


def _as_tags(value: Any) -> List[str]:
    # Comma-separated strings are accepted as well as YAML lists
    if isinstance(value, str):
        return [t.strip() for t in value.split(',') if t.strip()]
    if isinstance(value, list):
        return [str(t).strip() for t in value if t is not None and str(t).strip()]
    return []


def strip_extension(filename: str, extension: str = ".md") -> str:
    if extension and filename.endswith(extension):
        return filename[:-len(extension)]
    return filename


def build_record(
    category: str,
    filename: str,
    metadata: Dict[str, Any],
    build_time: datetime,
    extension: str = ".md",
) -> CatalogRecord:
    """Build the record for one document.

    Args:
        category: Enclosing category name
        filename: File name on disk
        metadata: Parsed front matter (may hold any keys)
        build_time: Build timestamp; its local calendar date is the default 'created'
        extension: Markdown extension stripped for the default title

    Returns:
        CatalogRecord with defaults applied

    Example:
        >>> from datetime import datetime
        >>> rec = build_record("prompts", "review.md", {"link": "x"}, datetime(2024, 1, 2))
        >>> rec.link, rec.title, rec.created
        ('prompts/review.md', 'review', '2024-01-02')
    """
    return CatalogRecord(
        filename=filename,
        title=_as_text(metadata.get("title")) or strip_extension(filename, extension),
        description=_as_text(metadata.get("description")) or NO_DESCRIPTION,
        link=f"{category}/{filename}",
        category=category,
        author=_as_text(metadata.get("author")) or UNKNOWN_AUTHOR,
        created=_as_text(metadata.get("created")) or build_time.astimezone().strftime("%Y-%m-%d"),
        tags=_as_tags(metadata.get("tags")),
    )
