"""Domain model for a single SQL Server build."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import AnyUrl, Field

from ..base import BaseSchema
from .enums import SqlServerRelease, SqlUpdateType
from .version import BuildVersion


class SqlServerBuild(BaseSchema):
    """
    One concrete, shipped build of SQL Server.

    A plain value container: every field is optional, independently writable
    and stored as given. Aliases carry the published column names, so
    ``model_dump(by_alias=True)`` produces ``Version``, ``KB``, ``ReleaseDate``
    and so on.
    """

    version: Optional[BuildVersion] = Field(default=None, alias="Version")
    sqlservr_exe_version: Optional[BuildVersion] = Field(default=None, alias="SqlservrExeVersion")
    file_version: Optional[BuildVersion] = Field(default=None, alias="FileVersion")

    q: Optional[str] = Field(default=None, alias="Q")
    kb: Optional[str] = Field(default=None, alias="KB")
    description: Optional[str] = Field(default=None, alias="Description")

    release_date: Optional[date] = Field(default=None, alias="ReleaseDate")
    link: Optional[AnyUrl] = Field(default=None, alias="Link")

    release: Optional[SqlServerRelease] = Field(default=None, alias="Release")
    update_type: Optional[SqlUpdateType] = Field(default=None, alias="UpdateType")
