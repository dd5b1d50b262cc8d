"""
Core package for the blog backup tool.

Logging, exceptions, path defaults, environment settings and shared
CLI helpers.
"""
