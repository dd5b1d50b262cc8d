"""
Blog Backup Package
===================

A console report of a blog's Markdown/MDX posts, usable without the
site framework.

Reads every ``*.md``/``*.mdx`` file in a posts directory, parses the
``---`` frontmatter header into flat metadata, sorts the posts by date
(newest first) and prints a summary of each.

Main Components:
    - utils: Frontmatter parsing, post discovery, date parsing
    - dataclasses: ParsedPost
    - pipeline: Loader, sorter, display, report and the CLI entry points
    - core: Logging, exceptions, settings, paths

Primary Interfaces:
    - blog_backup.pipeline.cli: ``blog-backup`` report
    - blog_backup.pipeline.verify: ``blog-backup-verify``
    - blog_backup.pipeline.selftest: ``blog-backup-selftest``

Example Usage:
    >>> from pathlib import Path
    >>> from blog_backup.pipeline.loader import PostLoader
    >>> posts = PostLoader(Path("posts")).get_posts()
    >>> [post.title for post in posts]

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Blog Backup Project"
