"""sqlserver_builds.

A typed vocabulary for describing Microsoft SQL Server builds.

Public types
------------

- ``SqlServerRelease``: major product line (``Sql7`` through ``SqlvNext``),
  valued with the internal product version so releases sort by recency.
- ``SqlUpdateType``: kind of build (``CTP``, ``RC``, ``RTM``, ``GDR``, ``SP``,
  ``CU``, ``Hotfix``, ``Update``).
- ``BuildVersion``: a ``major.minor[.build[.revision]]`` version number.
- ``SqlServerBuild``: one shipped build with its version numbers, KB article,
  description, release date, link and classification.

The package only defines these shapes. Populating, storing and querying a
catalog of builds is left to the code that uses them.
"""

from sqlserver_builds.core.errors import InvalidBuildVersionError, SqlServerBuildsError
from sqlserver_builds.core.models.domain import (
    BuildVersion,
    SqlServerBuild,
    SqlServerRelease,
    SqlUpdateType,
)

__all__ = [
    "BuildVersion",
    "InvalidBuildVersionError",
    "SqlServerBuild",
    "SqlServerBuildsError",
    "SqlServerRelease",
    "SqlUpdateType",
]
