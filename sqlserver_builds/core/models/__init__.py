"""Core models for SQL Server build metadata."""

from __future__ import annotations

from .base import BaseSchema
from .domain import (
    BuildVersion,
    SqlServerBuild,
    SqlServerRelease,
    SqlUpdateType,
)

__all__ = [
    "BaseSchema",
    "BuildVersion",
    "SqlServerBuild",
    "SqlServerRelease",
    "SqlUpdateType",
]
