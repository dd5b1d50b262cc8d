#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for post discovery.

Functions:
    is_post_file: Check whether a file name is a Markdown/MDX post
    list_post_files: List post file names in a directory

Usage:
    from blog_backup.utils.fs import list_post_files

    names = list_post_files(Path("posts"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
from pathlib import Path
from typing import List

POST_FILE_RE = re.compile(r"\.mdx?$")


def is_post_file(name: str) -> bool:
    """True for names ending in ``.md`` or ``.mdx`` (case-sensitive)."""
    return POST_FILE_RE.search(name) is not None


def list_post_files(directory: str | Path) -> List[str]:
    """
    List post file names in a directory, in directory-listing order.

    Args:
        directory: Posts directory

    Returns:
        File names (not paths) ending in .md or .mdx

    Raises:
        OSError: If the directory is missing or cannot be read
    """
    return [name for name in os.listdir(directory) if is_post_file(name)]
