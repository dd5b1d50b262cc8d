#!/usr/bin/env python3
"""
report.py
-------------------
Full console report: blog settings, then every post, newest first.

Usage:
    from blog_backup.core.config import GlobalSettings
    from blog_backup.pipeline.loader import PostLoader
    from blog_backup.pipeline.report import run_report

    shown = run_report(GlobalSettings.from_env(), PostLoader(Path("posts")))
"""
# --- Annotations ---
from __future__ import annotations

# --- Third party imports ---
import click

# --- Local imports ---
from blog_backup.core.config import GlobalSettings
from blog_backup.core.logging_manager import safe_logger
from blog_backup.pipeline.display import display_post, separator
from blog_backup.pipeline.loader import PostLoader


def print_settings(settings: GlobalSettings) -> None:
    click.echo(f"📚 Blog: {settings.blog_title}")
    click.echo(f"👤 Author: {settings.author_name}")
    click.echo(f"📜 Footer: {settings.footer_text}")


def run_report(settings: GlobalSettings, loader: PostLoader) -> int:
    """
    Print the settings header and one block per post.

    Args:
        settings: Snapshot of the blog settings
        loader: Loader bound to the posts directory

    Returns:
        Number of posts printed
    """
    logger = safe_logger(loader.logger)

    click.echo("🚀 Blog Backup Script Starting...\n")
    print_settings(settings)

    posts = loader.get_posts()

    if not posts:
        click.echo("\n❌ No posts found in the posts directory.")
        logger.log_info("No posts found", {"posts_dir": loader.posts_dir})
        return 0

    click.echo(f"\n✅ Found {len(posts)} post(s):")

    for index, post in enumerate(posts):
        display_post(post, index)

    click.echo(f"\n{separator()}")
    click.echo("🎉 Blog backup script completed successfully!")
    click.echo(f"📊 Total posts processed: {len(posts)}")
    click.echo(f"{separator()}\n")

    logger.log_operation("report", {"posts": len(posts), **loader.stats.to_dict()})
    return len(posts)
