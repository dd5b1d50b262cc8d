"""
Utilities package for the blog backup tool.

This package provides commonly-used utilities organized by domain:
- md: Frontmatter parsing
- fs: Post file discovery
- parsers: Frontmatter value parsing (dates)

Import commonly-used utilities directly from this package:
    from blog_backup.utils import parse_frontmatter, list_post_files, parse_date
"""

from .md import parse_frontmatter
from .fs import is_post_file, list_post_files
from .parsers import parse_date

__all__ = [
    "parse_frontmatter",
    "is_post_file",
    "list_post_files",
    "parse_date",
]
