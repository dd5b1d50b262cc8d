#!/usr/bin/env python3
"""
loader.py
-------------------
Load every Markdown/MDX post from a posts directory.

A missing or unreadable directory counts as an empty one. A file that
cannot be read is reported and skipped; the remaining files are still
loaded. Posts come back in directory-listing order unless requested
sorted through ``get_posts``.

Usage:
    from blog_backup.pipeline.loader import PostLoader

    loader = PostLoader(Path("posts"), logger)
    posts = loader.get_posts()
    print(loader.stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Third party imports ---
import click

# --- Local imports ---
from blog_backup.core.cli import ReportStats
from blog_backup.core.exceptions import PostReadError, PostsDirectoryError
from blog_backup.core.logging_manager import BlogLogger, safe_logger
from blog_backup.dataclasses.post import ParsedPost
from blog_backup.pipeline.sorter import sort_posts_by_date
from blog_backup.utils import fs


class PostLoader:
    """
    Reads and parses the posts in one directory.

    Attributes:
        posts_dir: Directory holding the .md/.mdx files
        logger: Optional BlogLogger for file logs
        stats: Counters for the most recent load
    """

    def __init__(self, posts_dir: Path, logger: Optional[BlogLogger] = None) -> None:
        self.posts_dir = Path(posts_dir)
        self.logger = logger
        self.stats = ReportStats()

    def _list_directory(self) -> List[str]:
        try:
            return fs.list_post_files(self.posts_dir)
        except OSError as e:
            raise PostsDirectoryError(e.strerror or str(e)) from e

    def list_post_files(self) -> List[str]:
        """
        List post file names, or an empty list if the directory can't be read.

        Returns:
            File names ending in .md or .mdx
        """
        try:
            names = self._list_directory()
        except PostsDirectoryError as e:
            safe_logger(self.logger).log_error(e, {"posts_dir": self.posts_dir})
            click.echo(f"Error reading posts directory: {e}", err=True)
            return []

        safe_logger(self.logger).log_debug(
            "Listed post files", {"posts_dir": self.posts_dir, "count": len(names)}
        )
        return names

    def load_posts(self) -> List[ParsedPost]:
        """
        Parse every post file, skipping the ones that fail to read.

        Returns:
            ParsedPost list in directory-listing order
        """
        self.stats = ReportStats()
        posts: List[ParsedPost] = []

        for name in self.list_post_files():
            self.stats.files_processed += 1
            try:
                post = ParsedPost.from_file(self.posts_dir / name, name)
            except PostReadError as e:
                self.stats.errors += 1
                self.stats.files_skipped += 1
                safe_logger(self.logger).log_error(e, {"file": name})
                click.echo(f"Error reading post {name}: {e}", err=True)
                continue

            self.stats.posts_loaded += 1
            posts.append(post)

        logger = safe_logger(self.logger)
        logger.log_operation("load_posts", self.stats.to_dict())
        logger.log_info(f"Loaded posts: {self.stats.summary()}")
        return posts

    def get_posts(self) -> List[ParsedPost]:
        """Load all posts and sort them newest first."""
        return sort_posts_by_date(self.load_posts())
