from __future__ import annotations
from typing import Dict, List, Protocol

from runtimeframework.core.errors import FrameworkFormatError, InvalidArgumentError
from runtimeframework.core.version import Version


class Runtime(Protocol):
    """A platform family: the lineage of execution engine a framework runs on."""
    name: str
    display_name: str
    framework_identifier: str

    def get_clr_version_for_framework(self, framework_version: Version) -> Version: ...

    def matches(self, other: "Runtime") -> bool: ...


class _BaseRuntime:
    name = ""
    display_name = ""
    framework_identifier = ""

    def matches(self, other: Runtime) -> bool:
        return other is self or other is ANY

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Runtime({self.name})"


class NetRuntime(_BaseRuntime):
    name = "Net"
    display_name = ".NET"
    framework_identifier = ".NETFramework"

    def matches(self, other: Runtime) -> bool:
        return super().matches(other) or other is MONO

    def get_clr_version_for_framework(self, framework_version: Version) -> Version:
        major = framework_version.major
        if major == 1:
            if framework_version.minor == 0:
                return Version(1, 0, 3705)
            return Version(1, 1, 4322)
        if major in (2, 3):
            return Version(2, 0, 50727)
        if major == 4:
            return Version(4, 0, 30319)
        raise InvalidArgumentError(f"Unknown version for .NET Framework: {framework_version}")


class MonoRuntime(_BaseRuntime):
    name = "Mono"
    display_name = "Mono"
    framework_identifier = ".NETFramework"

    def matches(self, other: Runtime) -> bool:
        return super().matches(other) or other is NET

    def get_clr_version_for_framework(self, framework_version: Version) -> Version:
        major = framework_version.major
        if major == 1:
            return Version(1, 1, 4322)
        if major in (2, 3):
            return Version(2, 0, 50727)
        if major == 4:
            return Version(4, 0, 30319)
        raise InvalidArgumentError(f"Unknown version for Mono runtime: {framework_version}")


class AnyRuntime(_BaseRuntime):
    name = "Any"
    display_name = "Any"
    framework_identifier = "Any"

    def matches(self, other: Runtime) -> bool:
        return True

    def get_clr_version_for_framework(self, framework_version: Version) -> Version:
        return framework_version


NET = NetRuntime()
MONO = MonoRuntime()
ANY = AnyRuntime()

# Insertion order decides reverse lookups by framework identifier
_REGISTRY: Dict[str, Runtime] = {}


def register_runtime(runtime: Runtime) -> None:
    if runtime is None:
        raise InvalidArgumentError("runtime must not be None")
    key = runtime.name.lower()
    if not key or not key.isalpha():
        raise InvalidArgumentError(f"Runtime name must be alphabetic, got {runtime.name!r}")
    _REGISTRY[key] = runtime


def known_runtimes() -> List[Runtime]:
    return list(_REGISTRY.values())


def parse_runtime(token: str) -> Runtime:
    """Resolve a family token such as 'net' or 'Mono' (case-insensitive)."""
    runtime = _REGISTRY.get(str(token).lower())
    if runtime is None:
        raise FrameworkFormatError(f"Unknown runtime '{token}'")
    return runtime


def runtime_from_framework_identifier(identifier: str) -> Runtime:
    for runtime in _REGISTRY.values():
        if runtime.framework_identifier.lower() == str(identifier).lower():
            return runtime
    raise FrameworkFormatError(f"Unrecognized framework identifier '{identifier}'")


for _rt in (NET, MONO, ANY):
    register_runtime(_rt)
