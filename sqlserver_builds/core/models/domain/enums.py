"""Classification enums for SQL Server builds."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class SqlServerRelease(IntEnum):
    """
    Major SQL Server product line.

    Values follow the internal product version (major * 100, with ``Sql2008R2``
    filling the gap at 1050) and increase with release recency.
    """

    Sql7 = 700
    Sql2000 = 800
    Sql2005 = 900
    Sql2008 = 1000
    Sql2008R2 = 1050
    Sql2012 = 1100
    Sql2014 = 1200
    Sql2016 = 1300
    SqlvNext = 1400


@unique
class SqlUpdateType(IntEnum):
    """
    Category of a build within a release line.

    Only the member name is meaningful to consumers; the numbers are the
    zero-based declaration order.
    """

    CTP = 0  # Community Technology Preview
    RC = 1  # Release candidate
    RTM = 2
    GDR = 3  # General distribution release
    SP = 4  # Service pack
    CU = 5  # Cumulative update
    Hotfix = 6
    Update = 7
