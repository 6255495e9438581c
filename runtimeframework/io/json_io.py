from __future__ import annotations
import json
from typing import Any, Dict, Iterable, List
from pathlib import Path
from runtimeframework.core.framework import RuntimeFramework

def save_frameworks(path: str | Path, frameworks: Iterable[RuntimeFramework]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "schema_version": "1",
        "frameworks": [f.to_dict() for f in frameworks],
    }
    with p.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

def load_frameworks(path: str | Path) -> List[RuntimeFramework]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and "frameworks" in data:
        items = data["frameworks"]
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError("Unrecognized frameworks JSON format")
    # Bare strings are accepted as ids
    return [
        RuntimeFramework.parse(item) if isinstance(item, str) else RuntimeFramework.from_dict(item)
        for item in items
    ]

def save_json(path: str | Path, obj: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
