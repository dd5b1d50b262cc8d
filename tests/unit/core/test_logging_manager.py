"""
Tests for logging_manager module.

Tests BlogLogger file output, the NullLogger / safe_logger pair, and
handle_cli_error.
"""
import pytest
import click
from unittest.mock import MagicMock

from blog_backup.core.exceptions import PostReadError
from blog_backup.core.logging_manager import (
    BlogLogger,
    NullLogger,
    handle_cli_error,
    safe_logger,
)


class TestBlogLogger:
    """Tests for BlogLogger."""

    def test_creates_log_files(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = BlogLogger(log_dir, "test_component")
        logger.log_info("hello")

        assert (log_dir / "test_component.log").exists()
        assert (log_dir / "errors.log").exists()

    def test_operation_written_as_json(self, tmp_path):
        logger = BlogLogger(tmp_path, "ops")
        logger.log_operation("load_posts", {"posts_loaded": 3})

        content = (tmp_path / "ops.log").read_text(encoding="utf-8")
        assert 'OPERATION - load_posts: {"posts_loaded": 3}' in content

    def test_error_goes_to_error_log(self, tmp_path):
        logger = BlogLogger(tmp_path, "errs")
        logger.log_error(PostReadError("bad.md", "Permission denied"), {"file": "bad.md"})

        content = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert "PostReadError: Permission denied" in content
        assert "file=bad.md" in content

    def test_reinitialising_does_not_duplicate_handlers(self, tmp_path):
        BlogLogger(tmp_path, "dup")
        logger = BlogLogger(tmp_path, "dup")
        assert len(logger.main_logger.handlers) == 1
        assert len(logger.error_logger.handlers) == 1

    def test_log_cli_error_format(self, tmp_path):
        logger = BlogLogger(tmp_path, "cli")
        message = logger.log_cli_error(ValueError("boom"))
        assert message == "❌ ValueError: boom"


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_all_methods_are_no_ops(self):
        logger = NullLogger()
        logger.log_operation("op", {"key": "value"})
        logger.log_error(ValueError("x"), {"context": "test"})
        logger.log_debug("debug", {"key": "value"})
        logger.log_info("info")

    def test_log_cli_error_returns_formatted(self):
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert result == "❌ ValueError: test error"


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=BlogLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_exits_with_message(self, capsys):
        mock_logger = MagicMock(spec=BlogLogger)
        mock_logger.log_cli_error.return_value = "❌ ValueError: boom"
        ctx = click.Context(click.Command("report"), obj={"logger": mock_logger})

        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("boom"), "report", {"posts_dir": "posts"})

        assert exc_info.value.code == 1
        assert "❌ ValueError: boom" in capsys.readouterr().err
        context = mock_logger.log_cli_error.call_args[0][1]
        assert context == {"operation": "report", "posts_dir": "posts"}

    def test_works_without_logger(self, capsys):
        ctx = click.Context(click.Command("report"), obj={})

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, RuntimeError("no logger"), "report", exit_code=3)

        assert "RuntimeError: no logger" in capsys.readouterr().err
