"""Parsed Artifactory version with component-wise ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

_LEADING_DIGITS = re.compile(r"^(\d+)")


@total_ordering
@dataclass(frozen=True)
class ArtifactoryVersion:
    """Dotted numeric version; development builds sort above every release."""

    parts: Tuple[int, ...]
    raw: str = ""
    development: bool = False

    @classmethod
    def parse(cls, value: str) -> "ArtifactoryVersion":
        text = (value or "").strip()
        if not text:
            raise ValueError("Empty Artifactory version")
        if text.lower() == "development" or text.startswith("${"):
            return cls(parts=(), raw=text, development=True)

        parts = []
        for component in text.split("."):
            match = _LEADING_DIGITS.match(component)
            if not match:
                break
            parts.append(int(match.group(1)))
            if match.end() != len(component):
                # "6-SNAPSHOT", "0rc1": keep the number, ignore the qualifier
                break
        if not parts:
            raise ValueError(f"Malformed Artifactory version '{value}'")
        return cls(parts=tuple(parts), raw=text)

    def _normalized(self) -> Tuple[int, ...]:
        parts = list(self.parts)
        while parts and parts[-1] == 0:
            parts.pop()
        return tuple(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArtifactoryVersion):
            return NotImplemented
        if self.development or other.development:
            return self.development == other.development
        return self._normalized() == other._normalized()

    def __lt__(self, other: "ArtifactoryVersion") -> bool:
        if not isinstance(other, ArtifactoryVersion):
            return NotImplemented
        if self.development:
            return False
        if other.development:
            return True
        return self._normalized() < other._normalized()

    def __hash__(self) -> int:
        return hash((self.development, self._normalized()))

    def is_at_least(self, other: "ArtifactoryVersion") -> bool:
        return self >= other

    def __str__(self) -> str:
        if self.raw:
            return self.raw
        return ".".join(str(part) for part in self.parts)
