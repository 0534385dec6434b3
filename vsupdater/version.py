"""Game version numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_PART = re.compile(r"\+?[0-9]+")
_MAX_PART = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class GameVersion:
    """A ``major.minor.patch`` version."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> GameVersion:
        """Parse ``major.minor.patch``, optionally followed by ``.txt``.

        Raises ValueError if the text is not a valid version.
        """
        cleaned = text.removesuffix(".txt")
        parts = cleaned.split(".")
        if len(parts) != 3:
            raise ValueError(f"Invalid game version: {text}")
        numbers = []
        for part in parts:
            if not _PART.fullmatch(part):
                raise ValueError(f"Invalid game version: {text}")
            value = int(part)
            if value > _MAX_PART:
                raise ValueError(f"Invalid game version: {text}")
            numbers.append(value)
        return cls(*numbers)

    def next_patch(self) -> GameVersion:
        """The version with the patch number raised by one."""
        return replace(self, patch=self.patch + 1)

    def next_minor(self) -> GameVersion:
        """The next minor version, with patch reset to zero."""
        return replace(self, minor=self.minor + 1, patch=0)

    def next_major(self) -> GameVersion:
        """The next major version, with minor and patch reset to zero."""
        return GameVersion(self.major + 1, 0, 0)

    def is_empty(self) -> bool:
        """True for ``0.0.0``."""
        return self.major == 0 and self.minor == 0 and self.patch == 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"