from __future__ import annotations
from typing import Any, Dict, List
import json
import logging
from pathlib import Path

from runtimeframework.core.framework import RuntimeFramework
from runtimeframework.core.service import RuntimeFrameworkService
from runtimeframework.core.version import Version

logger = logging.getLogger(__name__)

def load_config(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        text = f.read()
    suffix = p.suffix.lower()
    logger.debug("Loading config from %s", p)
    if suffix in (".yaml", ".yml"):
        try:
            import yaml  # type: ignore
        except Exception as e:
            raise ImportError("PyYAML is required to load YAML config files. Install with `pip install pyyaml`.") from e
        try:
            return yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {p}: {e}") from e
    # default to JSON
    return json.loads(text or "{}")

def _make_framework(spec: Any) -> RuntimeFramework:
    if isinstance(spec, str):
        return RuntimeFramework.parse(spec)
    if not isinstance(spec, dict):
        raise ValueError(f"Framework entry must be a string or mapping, got {spec!r}")

    if "framework_name" in spec:
        fw = RuntimeFramework.from_framework_name(str(spec["framework_name"]))
    elif "id" in spec:
        base = RuntimeFramework.parse(str(spec["id"]))
        profile = spec.get("profile")
        fw = RuntimeFramework(base.runtime, base.framework_version, str(profile) if profile else None)
    else:
        raise ValueError(f"Framework entry needs an 'id' or 'framework_name': {spec!r}")

    clr = spec.get("clr_version")
    if clr is not None:
        # YAML reads an unquoted 2.10 as the float 2.1
        if not isinstance(clr, str):
            raise ValueError(f"clr_version must be a quoted version string, got {clr!r}")
        fw.set_clr_version(Version.parse(clr))
    if spec.get("display_name"):
        fw.set_display_name(str(spec["display_name"]))
    return fw

def build_frameworks(cfg: Dict[str, Any]) -> List[RuntimeFramework]:
    entries = cfg.get("frameworks") or []
    if not isinstance(entries, list):
        raise ValueError("'frameworks' must be a list")
    return [_make_framework(e) for e in entries]

def build_from_config(cfg: Dict[str, Any], *, start: bool = True) -> RuntimeFrameworkService:
    service = RuntimeFrameworkService(build_frameworks(cfg))
    if start:
        service.initialize_service()
    return service
