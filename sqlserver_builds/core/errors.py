"""Error types for the SQL Server build-metadata package.

The data model itself accepts field values as given; the only failures it can
raise come from constructing its semantic value types from text.
"""

from __future__ import annotations


class SqlServerBuildsError(Exception):
    """Base error for all sqlserver_builds exceptions."""


class InvalidBuildVersionError(SqlServerBuildsError, ValueError):
    """Raised when text cannot be read as a ``major.minor[.build[.revision]]`` version."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid build version '{text}': {reason}")
        self.text = text
        self.reason = reason
