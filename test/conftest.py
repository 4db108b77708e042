from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterator

import pytest
from pydantic import AnyUrl

from sqlserver_builds.core.models.domain import (
    BuildVersion,
    SqlServerBuild,
    SqlServerRelease,
    SqlUpdateType,
)


@pytest.fixture
def sql2016_rtm_values() -> Dict[str, Any]:
    """Field values for the SQL Server 2016 RTM build, keyed by field name."""
    return {
        "version": BuildVersion.parse("13.0.1601.5"),
        "sqlservr_exe_version": BuildVersion.parse("2015.130.1601.5"),
        "file_version": BuildVersion.parse("2015.130.1601.5"),
        "q": "Q3182545",
        "kb": "KB3182545",
        "description": "SQL Server 2016 RTM",
        "release_date": date(2016, 6, 1),
        "link": AnyUrl("https://support.microsoft.com/kb/3182545"),
        "release": SqlServerRelease.Sql2016,
        "update_type": SqlUpdateType.RTM,
    }


@pytest.fixture
def sql2016_rtm(sql2016_rtm_values: Dict[str, Any]) -> SqlServerBuild:
    return SqlServerBuild(**sql2016_rtm_values)


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Drop the handlers installed by setup_logging() and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
