#!/usr/bin/env python3
"""
display.py
-------------------
Console rendering of a single post.

Each post is printed as a numbered block: a header framed by ``=``
separators, the optional date and description, the file name, and a
one-line preview of the body.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List

# --- Third party imports ---
import click

# --- Local imports ---
from blog_backup.dataclasses.post import ParsedPost

SEPARATOR_WIDTH = 60
PREVIEW_SEPARATOR_WIDTH = 40
PREVIEW_LENGTH = 200
UNTITLED = "Untitled"


def separator(char: str = "=", width: int = SEPARATOR_WIDTH) -> str:
    return char * width


def body_preview(body: str, length: int = PREVIEW_LENGTH) -> str:
    """
    First ``length`` characters of the body on a single line.

    Newlines become spaces; ``...`` is appended only when the body is
    longer than ``length``.
    """
    preview = body[:length].replace("\n", " ")
    return preview + ("..." if len(body) > length else "")


def format_post(post: ParsedPost, index: int) -> List[str]:
    """
    Build the report lines for one post.

    Args:
        post: Post to render
        index: 0-based position in the sorted list

    Returns:
        Output lines, in print order
    """
    lines = [
        "",
        separator(),
        f"POST #{index + 1}: {post.title or UNTITLED}",
        separator(),
    ]

    if post.date:
        lines.append(f"📅 Date: {post.date}")

    if post.description:
        lines.append(f"📝 Description: {post.description}")

    lines.append(f"📄 File: {post.file_name}")

    if post.body:
        lines.extend([
            "",
            f"📖 Content Preview (first {PREVIEW_LENGTH} chars):",
            separator("-", PREVIEW_SEPARATOR_WIDTH),
            body_preview(post.body),
        ])

    return lines


def display_post(post: ParsedPost, index: int) -> None:
    """Print one post's block to stdout."""
    for line in format_post(post, index):
        click.echo(line)
