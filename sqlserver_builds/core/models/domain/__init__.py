"""Domain models and enums describing SQL Server releases and builds.

These types form a shared vocabulary for code that keeps a catalog of known
builds:

- ``SqlServerRelease``: the major product line a build belongs to,
- ``SqlUpdateType``: the kind of build (CTP, RTM, service pack, CU, ...),
- ``BuildVersion``: the dotted version numbers stamped on a build,
- ``SqlServerBuild``: the record tying them together.
"""

from .enums import SqlServerRelease, SqlUpdateType
from .models import SqlServerBuild
from .version import BuildVersion

__all__ = [
    "BuildVersion",
    "SqlServerBuild",
    "SqlServerRelease",
    "SqlUpdateType",
]
