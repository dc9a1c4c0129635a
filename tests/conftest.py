"""Shared test fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest
from navstage.config import Config, DocsConfig, NavigationConfig, ServerConfig


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create an empty content root."""
    docs = tmp_path / "docs"
    docs.mkdir(exist_ok=True)
    return docs


@pytest.fixture
def write_doc(docs_dir: Path) -> Callable[[str, str], Path]:
    """Return a helper writing a content file relative to docs_dir."""

    def _write(relative: str, content: str) -> Path:
        path = docs_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration with an empty sidebar."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir),
        navigation=NavigationConfig(),
        sidebar=None,
    )
