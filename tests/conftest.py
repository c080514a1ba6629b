from __future__ import annotations

import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from mdcatalog.config import CatalogConfig

BUILD_TIME = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


def set_timezone(monkeypatch: pytest.MonkeyPatch, tz: str) -> None:
    monkeypatch.setenv("TZ", tz)
    time.tzset()


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CATALOG_PRESET", "CATALOG_ROOT", "CATALOG_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    if hasattr(time, "tzset"):
        set_timezone(monkeypatch, "UTC")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    root = tmp_path / "corpus"
    root.mkdir()
    return root


@pytest.fixture
def write_doc(corpus: Path) -> Callable[[str, str, str], Path]:
    def _write(category: str, filename: str, content: str) -> Path:
        path = corpus / category / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def rich_config() -> CatalogConfig:
    return CatalogConfig(categories=("a", "b"), include_enrichment=True)
