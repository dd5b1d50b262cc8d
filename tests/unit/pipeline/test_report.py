"""
Tests for run_report.
"""
from unittest.mock import MagicMock

from blog_backup.core.config import GlobalSettings
from blog_backup.core.logging_manager import BlogLogger
from blog_backup.pipeline.loader import PostLoader
from blog_backup.pipeline.report import run_report


class TestRunReport:
    def test_header_and_posts(self, posts_dir, capsys):
        settings = GlobalSettings("Author X", "Title Y", "Footer Z")

        shown = run_report(settings, PostLoader(posts_dir))
        out = capsys.readouterr().out

        assert shown == 3
        assert out.startswith(
            "🚀 Blog Backup Script Starting...\n\n"
            "📚 Blog: Title Y\n"
            "👤 Author: Author X\n"
            "📜 Footer: Footer Z\n"
            "\n✅ Found 3 post(s):\n"
        )
        assert out.index("POST #1: New") < out.index("POST #2: Middle") < out.index("POST #3: Old")
        assert out.endswith(
            "\n" + "=" * 60 + "\n"
            "🎉 Blog backup script completed successfully!\n"
            "📊 Total posts processed: 3\n"
            + "=" * 60 + "\n\n"
        )

    def test_no_posts(self, tmp_dir, capsys):
        shown = run_report(GlobalSettings(), PostLoader(tmp_dir / "missing"))
        captured = capsys.readouterr()

        assert shown == 0
        assert captured.out.endswith("\n❌ No posts found in the posts directory.\n")
        assert "POST #" not in captured.out
        assert "Error reading posts directory" in captured.err

    def test_logs_report_operation(self, posts_dir, capsys):
        logger = MagicMock(spec=BlogLogger)
        run_report(GlobalSettings(), PostLoader(posts_dir, logger))

        operations = [call[0][0] for call in logger.log_operation.call_args_list]
        assert operations == ["load_posts", "report"]
