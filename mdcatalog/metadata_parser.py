"""
Front-matter parser for catalog documents.

Parses the metadata header at the top of a markdown file.

Format:
---
title: Python coding standards
description: Conventions for Python files
author: Jane Doe
created: 2024-01-15
tags: [python, style]
---
# Body starts here
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional, Tuple

import yaml


logger = logging.getLogger(__name__)

# Opening marker must be the very first line; the closing marker is the next
# line holding only three hyphens.
FRONT_MATTER_PATTERN = re.compile(
    r'\A---[ \t]*\r?\n(?P<block>.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)',
    re.DOTALL | re.MULTILINE,
)
OPENING_PATTERN = re.compile(r'\A---[ \t]*(?:\r?\n|\Z)')


class MetadataError(ValueError):
    """Exception raised when a front-matter header cannot be parsed."""
    pass


def _strip_bom(content: str) -> str:
    return content[1:] if content.startswith('\ufeff') else content


def split_front_matter(content: str) -> Tuple[Optional[str], str]:
    """Split content into raw header text and body.

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (header text or None, body). The header is None when the
        content has no front matter at all.

    Raises:
        MetadataError: If an opening marker has no matching closing marker
    """
    text = _strip_bom(content)

    if not OPENING_PATTERN.match(text):
        return None, content

    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        raise MetadataError("Front matter opened with '---' but never closed")

    return match.group('block'), text[match.end():]


def parse_metadata(content: str) -> Dict:
    """Parse the front-matter header of a document.

    Args:
        content: Markdown content, optionally starting with front matter

    Returns:
        Dictionary with metadata fields. Empty when there is no header.

    Raises:
        MetadataError: If the header is malformed or is not a mapping

    Example:
        >>> content = '''---
        ... title: Testing
        ... tags: [one, two]
        ... ---
        ... # Testing
        ... '''
        >>> metadata = parse_metadata(content)
        >>> metadata['title']
        'Testing'
        >>> metadata['tags']
        ['one', 'two']
    """
    block, _ = split_front_matter(content)
    if block is None:
        return {}
    return _parse_metadata_text(block)


def _parse_metadata_text(text: str) -> Dict:
    """Parse the header text (without the marker lines).

    Raises:
        MetadataError: If parsing fails
    """
    if not text.strip():
        return {}

    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as exc:
        # Impossible dates such as 2024-02-30 surface as plain ValueError
        raise MetadataError(f"Invalid front matter: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MetadataError(
            f"Front matter must be a mapping, got: {type(data).__name__}"
        )

    # Keys are matched by name later on, so force them to strings
    return {str(key): value for key, value in data.items()}


def extract_metadata_block(content: str, source: str = "<string>") -> Tuple[Dict, str]:
    """Extract metadata and return metadata + body without the header.

    Never raises for a bad header: the document degrades to empty metadata
    with its whole content as the body, and a warning is logged.

    Args:
        content: Markdown content
        source: Name used in the warning (usually the file path)

    Returns:
        Tuple of (metadata dict, body)

    Example:
        >>> metadata, body = extract_metadata_block('---\\ntitle: A\\n---\\nText')
        >>> metadata
        {'title': 'A'}
        >>> body
        'Text'
    """
    try:
        block, body = split_front_matter(content)
        if block is None:
            return {}, content
        return _parse_metadata_text(block), body
    except MetadataError as e:
        logger.warning("Ignoring front matter in %s: %s", source, e)
        return {}, content
