#!/usr/bin/env python3
"""
Blog Backup CLI
---------------

Print a console report of the blog posts in a directory, without the
site framework.

Flags, checked in this order:
    -h, --help      Show usage and stop (every other flag is ignored)
    -v, --version   Show the version and stop
    (none)          Run the full report

Help and version are read from the raw arguments, so they win even when
other options are malformed. Unknown options and arguments are accepted
and ignored; known options that fail to parse fall back to their defaults.

Usage:
    blog-backup
    blog-backup --posts-dir content/posts
    BLOG_NAME="John Doe" blog-backup
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import click

from blog_backup import __version__
from blog_backup.core import paths
from blog_backup.core.cli import open_logger
from blog_backup.core.config import GlobalSettings
from blog_backup.core.logging_manager import handle_cli_error, safe_logger
from blog_backup.pipeline.loader import PostLoader
from blog_backup.pipeline.report import run_report

VERSION_TEXT = f"Blog Backup Script v{__version__}"

HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-v", "--version")

HELP_TEXT = f"""
📖 Blog Backup Script Help
{"=" * 30}

Usage: blog-backup [options]

Options:
  --help, -h         Show this help message
  --version, -v      Show version information
  --posts-dir PATH   Directory with .md/.mdx posts (default: ./posts)
  --log-dir PATH     Directory for log files (default: ./logs)
  --verbose          Show tracebacks for unexpected errors

Environment Variables:
  BLOG_NAME        Set the blog author name
  BLOG_TITLE       Set the blog title
  BLOG_FOOTER_TEXT Set the footer text

Examples:
  blog-backup
  BLOG_NAME="John Doe" blog-backup
  BLOG_TITLE="My Awesome Blog" blog-backup
"""


def _has_flag(args: List[str], flags: tuple) -> bool:
    """True if any token is one of flags, with or without an ``=value``."""
    return any(arg.split("=", 1)[0] in flags for arg in args)


class ReportCommand(click.Command):
    """
    Command whose arguments never abort the run.

    Help and version are detected on the raw tokens before click parses
    anything. If the remaining arguments fail to parse, they are dropped
    and every option keeps its default.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        ctx.meta["show_help"] = _has_flag(args, HELP_FLAGS)
        ctx.meta["show_version"] = _has_flag(args, VERSION_FLAGS)
        ctx.meta["dropped_args"] = []

        if ctx.meta["show_help"] or ctx.meta["show_version"]:
            return super().parse_args(ctx, [])

        try:
            return super().parse_args(ctx, list(args))
        except click.UsageError as e:
            ctx.meta["dropped_args"] = list(args)
            ctx.meta["usage_error"] = e.format_message()
            ctx.params.clear()
            return super().parse_args(ctx, [])


@click.command(
    cls=ReportCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
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
@click.option("--verbose", is_flag=True, help="Show tracebacks for unexpected errors")
@click.pass_context
def cli(
    ctx: click.Context,
    posts_dir: Optional[Path],
    log_dir: Optional[Path],
    verbose: bool,
) -> None:
    """Blog Backup Script"""
    if ctx.meta.get("show_help"):
        click.echo(HELP_TEXT)
        return

    if ctx.meta.get("show_version"):
        click.echo(VERSION_TEXT)
        return

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["log_dir"] = log_dir or paths.log_dir()
    ctx.obj["logger"] = open_logger(ctx.obj["log_dir"], "report")
    logger = safe_logger(ctx.obj["logger"])

    if ctx.meta.get("dropped_args"):
        logger.log_debug(
            "Arguments did not parse, using defaults",
            {"args": ctx.meta["dropped_args"], "reason": ctx.meta.get("usage_error")},
        )
    elif ctx.args:
        logger.log_debug("Ignoring extra arguments", {"args": ctx.args})

    settings = GlobalSettings.from_env()
    loader = PostLoader(posts_dir or paths.posts_dir(), ctx.obj["logger"])

    try:
        run_report(settings, loader)
    except Exception as e:
        handle_cli_error(ctx, e, "report", {"posts_dir": loader.posts_dir})


if __name__ == "__main__":
    cli(obj={})
