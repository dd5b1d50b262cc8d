#!/usr/bin/env python3
"""
paths.py
-------------------
Path defaults for the blog backup tool.

The tool works on the directory it is run from:
    CWD/
    ├── posts/         # Markdown/MDX posts (*.md, *.mdx)
    └── logs/
        └── operations/  # Rotating component and error logs

Defaults are resolved when called rather than at import time, so that
changing the working directory between runs is honoured.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

POSTS_DIRNAME = "posts"
LOGS_DIRNAME = "logs"


def posts_dir(base: Optional[Path] = None) -> Path:
    """Default posts directory under ``base`` (the working directory if None)."""
    return (base or Path.cwd()) / POSTS_DIRNAME


def log_dir(base: Optional[Path] = None) -> Path:
    """Default log directory under ``base`` (the working directory if None)."""
    return (base or Path.cwd()) / LOGS_DIRNAME
