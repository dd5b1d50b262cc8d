"""
conftest.py
-----------
Shared pytest fixtures for blog backup tests.

Provides fixtures for:
- Temporary directories
- Sample post content
- A populated posts directory
- A clean blog environment
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from blog_backup.core.config import ENV_AUTHOR_NAME, ENV_BLOG_TITLE, ENV_FOOTER_TEXT


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the blog environment variables for the duration of a test."""
    for name in (ENV_AUTHOR_NAME, ENV_BLOG_TITLE, ENV_FOOTER_TEXT):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ----- Sample Post Content Fixtures -----

@pytest.fixture
def minimal_post_content():
    """Post with only a title."""
    return """---
title: Minimal
---
Just a body.
"""


@pytest.fixture
def full_post_content():
    """Post with every field the report reads."""
    return """---
title: "Full Post"
date: 2023-06-15
description: >- A post with everything
tags: ignored
---

# Full Post

Some body text.
"""


@pytest.fixture
def posts_dir(tmp_dir):
    """Posts directory with three dated posts and one non-post file."""
    directory = tmp_dir / "posts"
    directory.mkdir()
    (directory / "old.md").write_text(
        "---\ntitle: Old\ndate: 2023-01-01\n---\nOld body\n", encoding="utf-8"
    )
    (directory / "new.mdx").write_text(
        "---\ntitle: New\ndate: 2023-12-31\n---\nNew body\n", encoding="utf-8"
    )
    (directory / "middle.md").write_text(
        "---\ntitle: Middle\ndate: 2023-06-15\n---\nMiddle body\n", encoding="utf-8"
    )
    (directory / "notes.txt").write_text("not a post", encoding="utf-8")
    return directory
