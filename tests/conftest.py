"""Shared test fixtures."""

from pathlib import Path

import pytest
from wikinav.config import Config, DocsConfig, ServerConfig


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create docs directory with sample structure.

    docs/
    ├── index.md
    ├── about-us.md
    ├── _draft.md
    ├── .git/
    ├── _templates/
    ├── blog/
    │   ├── INDEX.md
    │   └── first-post.md
    └── docs/
        ├── index.md
        └── guide/
            ├── index.md
            ├── getting_started.md
            └── advanced/
                └── tuning.md
    """
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "index.md").write_text("# Home")
    (docs / "about-us.md").write_text("# About")
    (docs / "_draft.md").write_text("# Draft")
    (docs / ".git").mkdir()
    (docs / "_templates").mkdir()

    blog = docs / "blog"
    blog.mkdir()
    (blog / "INDEX.md").write_text("# Blog")
    (blog / "first-post.md").write_text("# First post")

    section = docs / "docs"
    section.mkdir()
    (section / "index.md").write_text("# Docs")

    guide = section / "guide"
    guide.mkdir()
    (guide / "index.md").write_text("# Guide")
    (guide / "getting_started.md").write_text("# Getting started")

    advanced = guide / "advanced"
    advanced.mkdir()
    (advanced / "tuning.md").write_text("# Tuning")

    return docs


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at docs_dir."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir),
    )
