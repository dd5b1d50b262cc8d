"""Allow ``python -m blog_backup``."""
from blog_backup.pipeline.cli import cli

if __name__ == "__main__":
    cli(obj={})
