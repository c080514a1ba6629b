"""
Configuration for the catalog builder.

A CatalogConfig says which category directories are scanned and which
fields end up in the catalog. Two presets ship with the tool:

    awesome-copilot  instructions/prompts/chatmodes, quoted descriptions,
                     a top-level "generated" timestamp (default)
    extended         instructions/prompts/chat-modes, plus category,
                     author, created and tags on every record

Environment variables (a .env file in the working directory is loaded
first, without overriding variables that are already set):

    CATALOG_PRESET   preset name (default: awesome-copilot)
    CATALOG_ROOT     corpus root directory (default: current directory)
    CATALOG_OUTPUT   output file (default: <root>/<config.output_name>)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv


logger = logging.getLogger(__name__)

DEFAULT_PRESET = "awesome-copilot"
DEFAULT_OUTPUT_NAME = "index.json"
NO_DESCRIPTION = "No description provided"
UNKNOWN_AUTHOR = "Unknown"


class ConfigError(ValueError):
    """Exception raised for an invalid configuration."""
    pass


@dataclass(frozen=True)
class CatalogConfig:
    """Which categories to scan and which fields to emit."""
    categories: Tuple[str, ...]
    include_category: bool = False
    quote_description: bool = False
    include_generated: bool = False
    include_enrichment: bool = False
    output_name: str = DEFAULT_OUTPUT_NAME
    extension: str = ".md"

    def __post_init__(self):
        # "generated" shares the top level with the category keys
        if self.include_generated and "generated" in self.categories:
            raise ConfigError(
                "A category named 'generated' clashes with the generation timestamp"
            )


PRESETS: Dict[str, CatalogConfig] = {
    "awesome-copilot": CatalogConfig(
        categories=("instructions", "prompts", "chatmodes"),
        quote_description=True,
        include_generated=True,
    ),
    "extended": CatalogConfig(
        categories=("instructions", "prompts", "chat-modes"),
        include_category=True,
        include_generated=True,
        include_enrichment=True,
    ),
}


def get_preset(name: str) -> CatalogConfig:
    """Look up a preset by name.

    Raises:
        ConfigError: If no preset has that name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigError(
            f"Unknown preset '{name}'. Must be one of: {sorted(PRESETS)}"
        ) from None


@dataclass
class Settings:
    """Resolved run settings: the config plus where to read and write."""
    config: CatalogConfig
    root: Path
    output_path: Path


def load_settings(
    env_file: Optional[Path] = None,
    preset: Optional[str] = None,
    root: Optional[Path] = None,
    output: Optional[Path] = None,
) -> Settings:
    """Resolve settings from arguments, then environment, then defaults.

    Args:
        env_file: .env file to load (default: ./.env if it exists)
        preset: Preset name, overrides CATALOG_PRESET
        root: Corpus root, overrides CATALOG_ROOT
        output: Output file, overrides CATALOG_OUTPUT

    Raises:
        ConfigError: If the preset name is unknown
    """
    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        logger.info("Loaded environment from %s", env_path)

    preset_name = preset or os.environ.get("CATALOG_PRESET", DEFAULT_PRESET)
    config = get_preset(preset_name)

    root_dir = Path(root or os.environ.get("CATALOG_ROOT") or Path.cwd())
    output_value = output or os.environ.get("CATALOG_OUTPUT")
    output_path = Path(output_value) if output_value else root_dir / config.output_name

    return Settings(config=config, root=root_dir, output_path=output_path)
