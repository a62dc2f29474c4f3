"""better-help tool implementations."""

from . import catch_all, query_help, reload_help

__all__ = [
    "catch_all",
    "query_help",
    "reload_help",
]
