from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

from runtimeframework.core.errors import FrameworkFormatError, InvalidArgumentError

UNSPECIFIED = -1


@total_ordering
@dataclass(frozen=True, eq=True)
class Version:
    """
    A dotted version of up to four components.

    Components that were not supplied hold UNSPECIFIED (-1). For ordering the
    sentinel sorts below any specified value, so 4.5 < 4.5.0. For matching
    (see versions_match) an unspecified build or revision matches anything.
    """
    major: int
    minor: int = UNSPECIFIED
    build: int = UNSPECIFIED
    revision: int = UNSPECIFIED

    def __post_init__(self) -> None:
        seen_unspecified = False
        for name, value in zip(("major", "minor", "build", "revision"), self.as_tuple()):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidArgumentError(f"Version {name} must be an int, got {value!r}")
            if value == UNSPECIFIED:
                if name == "major":
                    raise InvalidArgumentError("Version major component is required")
                seen_unspecified = True
            elif value < 0:
                raise InvalidArgumentError(f"Version {name} must be non-negative, got {value}")
            elif seen_unspecified:
                raise InvalidArgumentError(
                    f"Version {name} is specified but a preceding component is not"
                )

    @staticmethod
    def parse(text: str) -> "Version":
        if not isinstance(text, str):
            raise FrameworkFormatError(f"Version must be a string, got {text!r}")
        parts = text.strip().split(".")
        if not 1 <= len(parts) <= 4:
            raise FrameworkFormatError(f"'{text}' must have between 1 and 4 components")
        values = []
        for part in parts:
            # int() alone would accept '+1', ' 1' and '1_0'
            if not part.isdigit() or not part.isascii():
                raise FrameworkFormatError(f"'{text}' is not a valid version string")
            values.append(int(part))
        return Version(*values)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.major, self.minor, self.build, self.revision)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.as_tuple() if c != UNSPECIFIED)


def versions_match(v1: Version, v2: Version) -> bool:
    """
    Match two engine versions component-wise.
    Major and minor must be equal; build and revision are only compared
    when both sides specify them.
    """
    return (
        v1.major == v2.major
        and v1.minor == v2.minor
        and (v1.build < 0 or v2.build < 0 or v1.build == v2.build)
        and (v1.revision < 0 or v2.revision < 0 or v1.revision == v2.revision)
    )


def compare_versions(v1: Version, v2: Version) -> int:
    """Ordinary ordering: -1, 0 or 1. Unspecified components sort lowest."""
    a, b = v1.as_tuple(), v2.as_tuple()
    return (a > b) - (a < b)
