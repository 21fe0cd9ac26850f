"""Platform version parsing and comparison.

Versions look like ``2.1.0``, ``2.0.0.RELEASE``, ``2.0.0.M1`` or
``2.1.0-BUILD-SNAPSHOT``.  Qualifiers order as
``M < RC < BUILD-SNAPSHOT < RELEASE``; a version without a qualifier is a
release.  Unknown qualifiers sort before every known one, alphabetically.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

_VERSION_RE = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:[.-](?P<qualifier>[A-Za-z][A-Za-z-]*?)(?P<qualifier_version>\d+)?)?$"
)

KNOWN_QUALIFIERS: tuple[str, ...] = ("M", "RC", "BUILD-SNAPSHOT", "RELEASE")

RELEASE = "RELEASE"


@total_ordering
@dataclass(frozen=True)
class Version:
    """A parsed ``MAJOR.MINOR.PATCH[.QUALIFIER[N]]`` version."""

    major: int
    minor: int
    patch: int
    qualifier: str = RELEASE
    qualifier_version: int = 0

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse *text* or raise ``ValueError``."""
        match = _VERSION_RE.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid version: {text!r}")
        qualifier = (match.group("qualifier") or RELEASE).upper()
        qualifier_version = match.group("qualifier_version")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            qualifier=qualifier,
            qualifier_version=int(qualifier_version) if qualifier_version else 0,
        )

    @classmethod
    def safe_parse(cls, text: str | None) -> "Version | None":
        """Like ``parse`` but returns ``None`` for missing or invalid input."""
        if not text:
            return None
        try:
            return cls.parse(text)
        except ValueError:
            return None

    def _sort_key(self) -> tuple:
        if self.qualifier in KNOWN_QUALIFIERS:
            rank, name = KNOWN_QUALIFIERS.index(self.qualifier), ""
        else:
            rank, name = -1, self.qualifier
        return (self.major, self.minor, self.patch, rank, name, self.qualifier_version)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.qualifier == RELEASE:
            return base
        suffix = str(self.qualifier_version) if self.qualifier_version else ""
        return f"{base}.{self.qualifier}{suffix}"
