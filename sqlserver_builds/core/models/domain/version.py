"""Four-part dotted version value type.

``BuildVersion`` stands in for the ``major.minor[.build[.revision]]`` version
numbers SQL Server stamps on its products, executables and files. It is an
immutable value: it can be hashed, compared and rendered back to the dotted
text it was parsed from.
"""

from __future__ import annotations

import logging
import re
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple

from pydantic import ConfigDict, Field, model_validator

from ...errors import InvalidBuildVersionError
from ..base import BaseSchema

logger = logging.getLogger(__name__)

_COMPONENT = re.compile(r"[0-9]+")
_COMPONENT_NAMES = ("major", "minor", "build", "revision")


def _split_components(text: str) -> Dict[str, int]:
    """Split dotted version text into named integer components."""
    parts = text.strip().split(".")
    if not 2 <= len(parts) <= 4:
        logger.debug("Rejected version text %r: %d components", text, len(parts))
        raise InvalidBuildVersionError(text, "expected 2 to 4 dot-separated components")
    for part in parts:
        if not _COMPONENT.fullmatch(part):
            logger.debug("Rejected version text %r: bad component %r", text, part)
            raise InvalidBuildVersionError(text, f"component '{part}' is not a non-negative integer")
    return dict(zip(_COMPONENT_NAMES, (int(part) for part in parts)))


@total_ordering
class BuildVersion(BaseSchema):
    """
    A ``major.minor[.build[.revision]]`` version number.

    Components that were not given stay ``None`` and sort before any present
    value, so ``13.0 < 13.0.0 < 13.0.0.0``.
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    build: Optional[int] = Field(default=None, ge=0)
    revision: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _accept_dotted_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _split_components(data)
        return data

    @model_validator(mode="after")
    def _revision_requires_build(self) -> "BuildVersion":
        if self.revision is not None and self.build is None:
            raise ValueError("revision requires a build component")
        return self

    @classmethod
    def parse(cls, text: str) -> "BuildVersion":
        """
        Parse dotted version text such as ``"13.0.1601.5"``.

        Raises:
            InvalidBuildVersionError: If the text does not hold 2 to 4
                non-negative integer components.
        """
        return cls(**_split_components(text))

    def _sort_key(self) -> Tuple[int, int, int, int]:
        return (
            self.major,
            self.minor,
            -1 if self.build is None else self.build,
            -1 if self.revision is None else self.revision,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BuildVersion):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        parts = [self.major, self.minor, self.build, self.revision]
        return ".".join(str(part) for part in parts if part is not None)
