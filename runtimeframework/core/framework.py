from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Union

from runtimeframework.core.errors import FrameworkFormatError, InvalidArgumentError
from runtimeframework.core.framework_name import FrameworkName
from runtimeframework.core.runtime import Runtime, parse_runtime, runtime_from_framework_identifier
from runtimeframework.core.version import UNSPECIFIED, Version, compare_versions, versions_match

logger = logging.getLogger(__name__)

FULL_PROFILE = "Full"


def is_valid_framework_version(v: Version) -> bool:
    # Known framework versions have two or three components; build is below 3.
    return v.major > 0 and v.minor >= 0 and v.build < 3 and v.revision == UNSPECIFIED


def default_display_name(runtime: Runtime, version: Version, profile: Optional[str]) -> str:
    name = f"{runtime.display_name} {version}"
    if profile and profile != FULL_PROFILE:
        name += " - " + profile
    return name


class RuntimeFramework:
    """
    A particular version of a common language runtime implementation,
    e.g. net-4.5 or mono-2.0.

    clr_version and display_name are computed at construction. They may be
    replaced afterwards through set_clr_version() / set_display_name(), and
    nothing is recomputed when that happens. Instances are not synchronized:
    a caller that overrides either field must own the instance exclusively.
    """

    def __init__(self, runtime: Runtime, version: Version, profile: Optional[str] = None) -> None:
        if runtime is None:
            raise InvalidArgumentError("runtime must not be None")
        if not isinstance(version, Version):
            raise InvalidArgumentError(f"version must be a Version, got {version!r}")
        if not is_valid_framework_version(version):
            raise InvalidArgumentError(
                f"{version} is not a valid framework version: expected major > 0, "
                "minor >= 0, build < 3 and no revision"
            )

        self._runtime = runtime
        self._framework_version = version
        self._profile = profile
        self._clr_version = runtime.get_clr_version_for_framework(version)
        self._display_name = default_display_name(runtime, version, profile)
        self._framework_name = FrameworkName(runtime.framework_identifier, version)

    # --- construction from text ---

    @staticmethod
    def parse(text: str) -> "RuntimeFramework":
        """Parse an id of the form '<runtime>-<version>', e.g. 'net-4.5'."""
        if text is None:
            raise InvalidArgumentError("text must not be None")
        if not isinstance(text, str):
            raise FrameworkFormatError(f"RuntimeFramework id must be a string, got {text!r}")
        parts = text.split("-")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise FrameworkFormatError(
                f"'{text}' is not in the format '<runtime>-<version>'"
            )
        runtime = parse_runtime(parts[0])
        version = Version.parse(parts[1])
        return RuntimeFramework(runtime, version)

    @staticmethod
    def try_parse(text: str) -> Optional["RuntimeFramework"]:
        try:
            return RuntimeFramework.parse(text)
        except (ValueError, TypeError) as e:
            logger.debug("Could not parse runtime framework %r: %s", text, e)
            return None

    @staticmethod
    def from_framework_name(name: Union[str, FrameworkName]) -> "RuntimeFramework":
        if name is None:
            raise InvalidArgumentError("framework name must not be None")
        if not isinstance(name, FrameworkName):
            name = FrameworkName.parse(name)
        runtime = runtime_from_framework_identifier(name.identifier)
        return RuntimeFramework(runtime, name.version, name.profile)

    # --- read-only view ---

    @property
    def runtime(self) -> Runtime:
        return self._runtime

    @property
    def framework_version(self) -> Version:
        return self._framework_version

    @property
    def clr_version(self) -> Version:
        return self._clr_version

    @property
    def profile(self) -> Optional[str]:
        return self._profile

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def framework_name(self) -> FrameworkName:
        return self._framework_name

    @property
    def id(self) -> str:
        return f"{self._runtime.name.lower()}-{self._framework_version}"

    # --- explicit overrides ---

    def set_clr_version(self, version: Version) -> None:
        """Record the engine version actually found, e.g. by probing an install."""
        if version is None:
            raise InvalidArgumentError("clr version must not be None")
        logger.debug("Overriding CLR version of %s: %s -> %s", self.id, self._clr_version, version)
        self._clr_version = version

    def set_display_name(self, name: str) -> None:
        if name is None:
            raise InvalidArgumentError("display name must not be None")
        self._display_name = name

    # --- compatibility ---

    def supports(self, target: "RuntimeFramework") -> bool:
        """
        True if something built against target can run under this framework.
        Runtimes must match, CLR versions must match (unspecified build or
        revision ignored) and this framework's major and minor must each be
        at least the target's.
        """
        if not self._runtime.matches(target.runtime):
            return False
        return (
            versions_match(self._clr_version, target.clr_version)
            and self._framework_version.major >= target.framework_version.major
            and self._framework_version.minor >= target.framework_version.minor
        )

    def can_load(self, requested: "RuntimeFramework") -> bool:
        # Runtime is deliberately not compared here; callers check it first.
        return compare_versions(self._framework_version, requested.framework_version) >= 0

    # --- serialization ---

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "profile": self._profile,
            "clr_version": str(self._clr_version),
            "display_name": self._display_name,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "RuntimeFramework":
        if "id" not in d:
            raise FrameworkFormatError("RuntimeFramework dict requires an 'id'")
        base = RuntimeFramework.parse(str(d["id"]))
        fw = RuntimeFramework(base.runtime, base.framework_version, d.get("profile"))
        if d.get("clr_version"):
            fw.set_clr_version(Version.parse(str(d["clr_version"])))
        if d.get("display_name"):
            fw.set_display_name(str(d["display_name"]))
        return fw

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"RuntimeFramework({self.id!r}, profile={self._profile!r}, clr={self._clr_version})"
