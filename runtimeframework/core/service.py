from __future__ import annotations
import enum
import logging
from typing import Iterable, List, Optional

from runtimeframework.core.framework import RuntimeFramework

logger = logging.getLogger(__name__)


class ServiceStatus(enum.Enum):
    STOPPED = "stopped"
    STARTED = "started"
    ERROR = "error"


class RuntimeFrameworkService:
    """
    Lifecycle-managed holder of the frameworks available to a host, answering
    which of them can run a given target.
    """

    def __init__(self, frameworks: Iterable[RuntimeFramework] | None = None) -> None:
        self._configured: List[RuntimeFramework] = list(frameworks or [])
        self._available: List[RuntimeFramework] = []
        self.status = ServiceStatus.STOPPED

    def initialize_service(self) -> None:
        try:
            self._available = sorted(self._configured, key=lambda f: f.framework_version)
        except Exception:
            self.status = ServiceStatus.ERROR
            raise
        self.status = ServiceStatus.STARTED
        logger.debug("Runtime framework service started with %d frameworks", len(self._available))

    def unload_service(self) -> None:
        self._available = []
        self.status = ServiceStatus.STOPPED
        logger.debug("Runtime framework service stopped")

    def _require_started(self) -> None:
        if self.status is not ServiceStatus.STARTED:
            raise RuntimeError(f"RuntimeFrameworkService is not started (status: {self.status.value})")

    @property
    def available_frameworks(self) -> List[RuntimeFramework]:
        self._require_started()
        return list(self._available)

    def find_supporting(self, target: RuntimeFramework) -> List[RuntimeFramework]:
        self._require_started()
        return [f for f in self._available if f.supports(target)]

    def is_available(self, target: RuntimeFramework) -> bool:
        return bool(self.find_supporting(target))

    def select_runtime_framework(self, target: RuntimeFramework) -> Optional[RuntimeFramework]:
        """Lowest-versioned available framework that supports and can load target."""
        for f in self.find_supporting(target):
            if f.can_load(target):
                return f
        logger.debug("No available framework can run %s", target)
        return None
