#!/usr/bin/env python3
"""
sorter.py
-------------------
Order posts by their frontmatter date, newest first.

Posts whose date is missing or unparseable go after every dated post,
as if they were the oldest. The sort is stable: posts with equal dates,
and undated posts among themselves, keep their input order.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Tuple

# --- Local imports ---
from blog_backup.dataclasses.post import ParsedPost
from blog_backup.utils.parsers import parse_date


def post_sort_key(post: ParsedPost) -> Tuple[bool, float]:
    """Key that ranks valid dates above invalid ones, then by timestamp."""
    moment = parse_date(post.date)
    if moment is None:
        return False, 0.0
    return True, moment.timestamp()


def sort_posts_by_date(posts: List[ParsedPost]) -> List[ParsedPost]:
    """
    Sort posts in place by descending date.

    Args:
        posts: Posts to sort (modified in place)

    Returns:
        The same list, newest first
    """
    # reverse=True keeps equal keys in input order
    posts.sort(key=post_sort_key, reverse=True)
    return posts
