"""
pipeline package
----------------
Post loading, sorting, display and the console entry points.

    PostLoader -> sort_posts_by_date -> display_post, driven by run_report
"""
from blog_backup.pipeline.display import display_post, format_post
from blog_backup.pipeline.loader import PostLoader
from blog_backup.pipeline.report import run_report
from blog_backup.pipeline.sorter import sort_posts_by_date

__all__ = [
    "PostLoader",
    "display_post",
    "format_post",
    "run_report",
    "sort_posts_by_date",
]
