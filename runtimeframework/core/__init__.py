from .errors import RuntimeFrameworkError, InvalidArgumentError, FrameworkFormatError
from .version import UNSPECIFIED, Version, versions_match, compare_versions
from .runtime import (
    Runtime,
    NET,
    MONO,
    ANY,
    register_runtime,
    known_runtimes,
    parse_runtime,
    runtime_from_framework_identifier,
)
from .framework_name import FrameworkName
from .framework import RuntimeFramework, is_valid_framework_version
from .service import RuntimeFrameworkService, ServiceStatus

__all__ = [
    "RuntimeFrameworkError",
    "InvalidArgumentError",
    "FrameworkFormatError",
    "UNSPECIFIED",
    "Version",
    "versions_match",
    "compare_versions",
    "Runtime",
    "NET",
    "MONO",
    "ANY",
    "register_runtime",
    "known_runtimes",
    "parse_runtime",
    "runtime_from_framework_identifier",
    "FrameworkName",
    "RuntimeFramework",
    "is_valid_framework_version",
    "RuntimeFrameworkService",
    "ServiceStatus",
]
