#!/usr/bin/env python3
"""
config.py
--------------------
Blog identity settings resolved from the environment.

Three independent, optional environment variables name the blog author,
the blog title and the footer text. A variable that is present wins,
even when it is set to the empty string; otherwise a fixed default
applies.

Usage:
    from blog_backup.core.config import GlobalSettings

    settings = GlobalSettings.from_env()
    print(settings.blog_title)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

# ----- Environment variables -----
ENV_AUTHOR_NAME = "BLOG_NAME"
ENV_BLOG_TITLE = "BLOG_TITLE"
ENV_FOOTER_TEXT = "BLOG_FOOTER_TEXT"

# ----- Defaults -----
DEFAULT_AUTHOR_NAME = "Jay Doe"
DEFAULT_BLOG_TITLE = "Next.js Blog Theme"
DEFAULT_FOOTER_TEXT = "All rights reserved."


@dataclass(frozen=True)
class GlobalSettings:
    """
    Read-only snapshot of the blog identity settings.

    Attributes:
        author_name: Blog author (BLOG_NAME)
        blog_title: Blog title (BLOG_TITLE)
        footer_text: Footer text (BLOG_FOOTER_TEXT)
    """

    author_name: str = DEFAULT_AUTHOR_NAME
    blog_title: str = DEFAULT_BLOG_TITLE
    footer_text: str = DEFAULT_FOOTER_TEXT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GlobalSettings:
        """
        Resolve settings from the environment at call time.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            New GlobalSettings snapshot
        """
        env = os.environ if environ is None else environ
        return cls(
            author_name=_resolve(env, ENV_AUTHOR_NAME, DEFAULT_AUTHOR_NAME),
            blog_title=_resolve(env, ENV_BLOG_TITLE, DEFAULT_BLOG_TITLE),
            footer_text=_resolve(env, ENV_FOOTER_TEXT, DEFAULT_FOOTER_TEXT),
        )

    def to_dict(self) -> Dict[str, str]:
        """Return the settings keyed the way blog templates name them."""
        return {
            "name": self.author_name,
            "blogTitle": self.blog_title,
            "footerText": self.footer_text,
        }


def _resolve(env: Mapping[str, str], name: str, default: str) -> str:
    value = env.get(name)
    return default if value is None else value


def get_global_data(environ: Optional[Mapping[str, str]] = None) -> GlobalSettings:
    """Shorthand for ``GlobalSettings.from_env``; never cached."""
    return GlobalSettings.from_env(environ)
