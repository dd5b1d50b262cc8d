#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for blog backup commands.

Functions:
    setup_logger: Initialize BlogLogger for CLI operations
    open_logger: setup_logger, or None with a warning when logs can't be written

Classes:
    OperationStats: Base class for all statistics
    ReportStats: For post loading and report runs

Usage:
    from blog_backup.core.cli import setup_logger, ReportStats

    logger = setup_logger(log_dir, "report")
    stats = ReportStats()
    stats.posts_loaded += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

# --- Local imports ---
from blog_backup.core.logging_manager import BlogLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> BlogLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a BlogLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically paths.log_dir())
        component_name: Component identifier for logging (e.g., 'report', 'verify')

    Returns:
        Configured BlogLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return BlogLogger(operations_log_dir, component_name=component_name)


def open_logger(log_dir: Path, component_name: str) -> Optional[BlogLogger]:
    """
    Setup logging, falling back to no file logs if the directory is unusable.

    A read-only or blocked log directory never stops a command: a warning
    goes to stderr and the caller continues with ``safe_logger(None)``.

    Returns:
        Configured BlogLogger instance, or None
    """
    try:
        return setup_logger(log_dir, component_name)
    except OSError as e:
        click.echo(f"Warning: logging disabled, cannot write to {log_dir}: {e}", err=True)
        return None


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files attempted
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Elapsed seconds since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for log details."""
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ReportStats(OperationStats):
    """
    Statistics for loading posts and printing the report.

    Attributes:
        posts_loaded: Number of posts parsed successfully
        files_skipped: Number of files dropped after a read failure
    """
    posts_loaded: int = 0
    files_skipped: int = 0

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        super().__post_init__()
        if self.posts_loaded < 0:
            raise ValueError(f"posts_loaded must be non-negative, got {self.posts_loaded}")
        if self.files_skipped < 0:
            raise ValueError(f"files_skipped must be non-negative, got {self.files_skipped}")

    def summary(self) -> str:
        """Get formatted summary with post metrics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.posts_loaded} posts loaded, "
            f"{self.files_skipped} skipped, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with post metrics."""
        d = super().to_dict()
        d.update({
            "posts_loaded": self.posts_loaded,
            "files_skipped": self.files_skipped,
        })
        return d
