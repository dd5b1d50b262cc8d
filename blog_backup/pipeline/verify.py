#!/usr/bin/env python3
"""
verify.py
-------------------
Verification entry point for the blog backup tool.

Exercises each public operation in turn (settings, file listing,
loading, sorting), prints what it found, then runs the full report.
Any unexpected failure is printed with its traceback and exits with
status 1.

Usage:
    blog-backup-verify
    blog-backup-verify --posts-dir content/posts
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import sys
import traceback
from pathlib import Path
from typing import Optional

# --- Third party imports ---
import click

# --- Local imports ---
from blog_backup.core import paths
from blog_backup.core.cli import open_logger
from blog_backup.core.config import GlobalSettings, get_global_data
from blog_backup.core.exceptions import VerificationError
from blog_backup.core.logging_manager import safe_logger
from blog_backup.dataclasses.post import ParsedPost
from blog_backup.pipeline.loader import PostLoader
from blog_backup.pipeline.report import run_report
from blog_backup.pipeline.sorter import sort_posts_by_date


def run_checks(loader: PostLoader) -> None:
    """
    Call each operation once and print a line per result.

    Raises:
        VerificationError: If an operation returns the wrong shape
    """
    settings = get_global_data()
    if not isinstance(settings, GlobalSettings):
        raise VerificationError(f"get_global_data returned {type(settings).__name__}")
    click.echo(f"✅ get_global_data() works: {settings.to_dict()}")

    names = loader.list_post_files()
    click.echo(f"✅ list_post_files() works, found {len(names)} files: {names}")

    posts = loader.get_posts()
    if not all(isinstance(post, ParsedPost) for post in posts):
        raise VerificationError("get_posts returned a non-post item")
    click.echo(f"✅ get_posts() works, found {len(posts)} posts")

    if posts:
        click.echo(f"📄 First post title: {posts[0].title}")
        click.echo(f"📅 First post date: {posts[0].date}")

    resorted = sort_posts_by_date(list(posts))
    if len(resorted) != len(posts):
        raise VerificationError("sort_posts_by_date changed the number of posts")
    click.echo("✅ sort_posts_by_date() works, posts are sorted")


@click.command()
@click.option(
    "--posts-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory with .md/.mdx posts",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for log files",
)
def verify(posts_dir: Optional[Path], log_dir: Optional[Path]) -> None:
    """Verify the blog backup operations, then run the report."""
    click.echo("🔍 Verifying blog backup functionality...\n")

    logger = open_logger(log_dir or paths.log_dir(), "verify")
    try:
        loader = PostLoader(posts_dir or paths.posts_dir(), logger)

        run_checks(loader)

        click.echo("\n🎉 All function tests passed!")
        click.echo("📋 Now running the main script...\n")

        run_report(GlobalSettings.from_env(), loader)
    except Exception as e:
        safe_logger(logger).log_error(e, {"operation": "verify"})
        click.echo(f"❌ Error during verification: {e}", err=True)
        click.echo(f"Stack trace:\n{traceback.format_exc()}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    verify()
