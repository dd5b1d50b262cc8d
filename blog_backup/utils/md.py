#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for blog posts.

Parses the frontmatter header of a Markdown/MDX post into a flat
string mapping and returns the remaining body unchanged. Only
single-line ``key: value`` pairs are understood; nested YAML, lists
and multi-document headers are not.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Dict, Tuple

FRONTMATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*\n(.*)\Z", re.DOTALL)
FOLDED_MARKER = ">-"


# ----- Frontmatter Parsing -----
def parse_frontmatter(content: str) -> Tuple[Dict[str, str], str]:
    """
    Split a post into frontmatter metadata and body.

    Expected format:
        ---
        title: "My Post"
        date: 2024-01-15
        ---
        Body content here...

    Header lines without a colon, or starting with one, are skipped.
    One layer of matching quotes is stripped from each value, and a
    leading ``>-`` marker is dropped. Later keys overwrite earlier ones.

    Args:
        content: Full post file content

    Returns:
        Tuple of (metadata, body)
        - metadata: Header keys and values (empty without a header)
        - body: Text after the closing delimiter, or ``content`` unchanged

    Examples:
        >>> parse_frontmatter('---\\ntitle: "Hi"\\n---\\nBody')
        ({'title': 'Hi'}, 'Body')
        >>> parse_frontmatter("No header")
        ({}, 'No header')
    """
    match = FRONTMATTER_RE.match(content)
    if not match:
        return {}, content

    header, body = match.group(1), match.group(2)
    metadata: Dict[str, str] = {}

    for line in header.split("\n"):
        colon = line.find(":")
        if colon <= 0:
            continue

        key = line[:colon].strip()
        metadata[key] = _clean_value(line[colon + 1 :].strip())

    return metadata, body


def _clean_value(value: str) -> str:
    """Strip one layer of matching quotes, then a folded-scalar marker."""
    if (value.startswith('"') and value.endswith('"')) or (
        value.startswith("'") and value.endswith("'")
    ):
        value = value[1:-1]

    if value.startswith(FOLDED_MARKER):
        value = value[len(FOLDED_MARKER) :].strip()

    return value
