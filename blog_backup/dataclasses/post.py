#!/usr/bin/env python3
"""
post.py
-------------------
Dataclass representing a blog post parsed from a Markdown/MDX file.

A ParsedPost holds the flat frontmatter mapping, the body text after
the header, and the file name the post was read from. Only ``title``,
``date`` and ``description`` are read by the report; any other keys
are kept as-is.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

# --- Local imports ---
from blog_backup.core.exceptions import PostReadError
from blog_backup.utils.md import parse_frontmatter


@dataclass
class ParsedPost:
    """
    Parsed blog post.

    Attributes:
        metadata: Frontmatter keys and values (possibly empty)
        body: Text after the frontmatter (the whole file without a header)
        file_name: File name relative to the posts directory
    """

    metadata: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    file_name: str = ""

    @classmethod
    def from_text(cls, content: str, file_name: str) -> ParsedPost:
        """Parse post content already read into memory."""
        metadata, body = parse_frontmatter(content)
        return cls(metadata=metadata, body=body, file_name=file_name)

    @classmethod
    def from_file(cls, file_path: Path, file_name: Optional[str] = None) -> ParsedPost:
        """
        Read and parse a post file.

        Args:
            file_path: Path to the .md/.mdx file
            file_name: Name to record (defaults to the path's name)

        Returns:
            ParsedPost instance

        Raises:
            PostReadError: If the file cannot be read or decoded as UTF-8
        """
        name = file_name or Path(file_path).name
        try:
            content = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PostReadError(name, str(e)) from e

        return cls.from_text(content, name)

    @property
    def title(self) -> Optional[str]:
        return self.metadata.get("title")

    @property
    def date(self) -> Optional[str]:
        return self.metadata.get("date")

    @property
    def description(self) -> Optional[str]:
        return self.metadata.get("description")
