from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from runtimeframework.core.errors import FrameworkFormatError, InvalidArgumentError
from runtimeframework.core.version import Version


@dataclass(frozen=True)
class FrameworkName:
    """
    Platform-neutral framework descriptor, e.g.
    '.NETFramework,Version=v4.5,Profile=Client'.
    """
    identifier: str
    version: Version
    profile: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.identifier or not self.identifier.strip():
            raise InvalidArgumentError("FrameworkName identifier must not be empty")
        if not isinstance(self.version, Version):
            raise InvalidArgumentError(f"FrameworkName version must be a Version, got {self.version!r}")

    @staticmethod
    def parse(text: str) -> "FrameworkName":
        if not isinstance(text, str) or not text.strip():
            raise FrameworkFormatError("FrameworkName must be a non-empty string")
        components = [c.strip() for c in text.split(",")]
        identifier = components[0]
        if not identifier:
            raise FrameworkFormatError(f"'{text}' has no framework identifier")

        values: Dict[str, str] = {}
        for comp in components[1:]:
            key, sep, value = comp.partition("=")
            key = key.strip().lower()
            if not sep or key not in ("version", "profile"):
                raise FrameworkFormatError(f"'{text}' has an unrecognized component '{comp}'")
            if key in values:
                raise FrameworkFormatError(f"'{text}' repeats the '{key}' component")
            values[key] = value.strip()

        if "version" not in values:
            raise FrameworkFormatError(f"'{text}' has no Version component")
        raw = values["version"]
        if raw[:1] in ("v", "V"):
            raw = raw[1:]
        version = Version.parse(raw)
        return FrameworkName(identifier, version, values.get("profile") or None)

    def __str__(self) -> str:
        s = f"{self.identifier},Version=v{self.version}"
        if self.profile:
            s += f",Profile={self.profile}"
        return s
