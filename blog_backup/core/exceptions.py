#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the blog backup tool.

Exception Hierarchy:
    Exception (built-in)
    └── BlogBackupError - Base for all blog backup errors
        ├── PostsDirectoryError - Posts directory cannot be listed
        ├── PostReadError - A single post file cannot be read
        └── VerificationError - Self-verification found a broken operation

Usage:
    from blog_backup.core.exceptions import PostReadError

    try:
        post = ParsedPost.from_file(path)
    except PostReadError as e:
        logger.log_error(e, {"file": path.name})
"""


class BlogBackupError(Exception):
    """
    Base exception for blog backup errors.

    Catch this to handle any error raised by the package, or catch the
    specific subclasses for more granular handling.
    """

    pass


class PostsDirectoryError(BlogBackupError):
    """
    Exception for posts directory listing failures.

    Raised when the posts directory is missing, is not a directory,
    or cannot be read. The loader recovers from it by treating the
    directory as empty.

    Examples:
        >>> raise PostsDirectoryError("No such file or directory: 'posts'")
    """

    pass


class PostReadError(BlogBackupError):
    """
    Exception for individual post read failures.

    Raised when a post file cannot be opened or decoded as UTF-8.
    The loader skips the file and carries on with the rest.

    Attributes:
        file_name: Name of the file that failed

    Examples:
        >>> raise PostReadError("hello.md", "Permission denied")
    """

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        super().__init__(reason)


class VerificationError(BlogBackupError):
    """
    Exception for verification failures.

    Raised by the verification entry point when an operation returns
    a value of the wrong shape.
    """

    pass
