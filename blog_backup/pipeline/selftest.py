#!/usr/bin/env python3
"""
selftest.py
-------------------
Execution self-test: run the report CLI as a child process.

Runs ``python -m blog_backup`` three times (no flags, ``--help`` and
``--version``) with output passed straight through, then exits 0 only
if every run exited 0.

Usage:
    blog-backup-selftest
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

# --- Third party imports ---
import click

RUNS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Running blog-backup", ()),
    ("Testing --help flag", ("--help",)),
    ("Testing --version flag", ("--version",)),
)


def run_cli(args: Sequence[str], cwd: Optional[Path] = None) -> int:
    """Run the report CLI in a child interpreter and return its exit code."""
    completed = subprocess.run(
        [sys.executable, "-m", "blog_backup", *args],
        cwd=cwd,
        check=False,
    )
    return completed.returncode


def run_all(cwd: Optional[Path] = None) -> List[int]:
    """Run every self-test invocation in order, printing each exit code."""
    codes = []
    for number, (title, args) in enumerate(RUNS, 1):
        command = " ".join(["blog-backup", *args])
        click.echo(f"\n📋 Test {number}: {title}")
        click.echo("=" * 50)

        code = run_cli(args, cwd)
        click.echo(f"\n📊 {command} exited with code: {code}")
        codes.append(code)

    return codes


@click.command()
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Working directory for the child runs",
)
def selftest(cwd: Optional[Path]) -> None:
    """Run blog-backup with no flags, --help and --version."""
    click.echo("🚀 Testing blog-backup execution...")

    codes = run_all(cwd)

    click.echo("\n🎉 All execution tests completed!")
    click.echo("=" * 50)

    if all(code == 0 for code in codes):
        click.echo("✅ All tests passed!")
        sys.exit(0)

    click.echo("❌ Some tests failed")
    sys.exit(1)


if __name__ == "__main__":
    selftest()
