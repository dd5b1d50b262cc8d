"""
dataclasses package
-------------------
Dataclass definitions for parsed blog posts.

- ParsedPost: frontmatter metadata, body and file name of one post
"""
from blog_backup.dataclasses.post import ParsedPost

__all__ = ["ParsedPost"]
