from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence

from runtimeframework.core.framework import RuntimeFramework
from runtimeframework.core.service import RuntimeFrameworkService


def _framework_to_dict(f: Optional[RuntimeFramework]) -> Optional[Dict[str, Any]]:
    if f is None:
        return None
    return {
        "id": f.id,
        "display_name": f.display_name,
        "clr_version": str(f.clr_version),
        "profile": f.profile,
    }


def build_compatibility_rows(
    available: Sequence[RuntimeFramework],
    targets: Sequence[RuntimeFramework],
) -> List[Dict[str, Any]]:
    """
    One row per (available, target) pair.

    supports and can_load are reported independently: can_load ignores the
    runtime, so a row can show can_load=True with supports=False.
    """
    rows: List[Dict[str, Any]] = []
    idx = 0
    for t in targets:
        for a in available:
            idx += 1
            rows.append(
                {
                    "index": idx,
                    "available": _framework_to_dict(a),
                    "target": _framework_to_dict(t),
                    "supports": a.supports(t),
                    "can_load": a.can_load(t),
                }
            )
    return rows


def _trim(s: str, width: int) -> str:
    return s if len(s) <= width else (s[: max(0, width - 1)] + "…")


def format_compatibility_table(
    rows: List[Dict[str, Any]],
    *,
    max_rows: int = 50,
    col_widths: Optional[Dict[str, int]] = None,
) -> str:
    """
    Columns:
      IDX | AVAILABLE | CLR | TARGET | CLR | SUPPORTS | CAN_LOAD
    """
    widths = {
        "idx": 4,
        "av_id": 12,
        "av_clr": 12,
        "tg_id": 12,
        "tg_clr": 12,
        "flag": 8,
    }
    if col_widths:
        widths.update(col_widths)

    header = (
        f"{'IDX':>{widths['idx']}} | "
        f"{'AVAILABLE':<{widths['av_id']}} | {'CLR':<{widths['av_clr']}} | "
        f"{'TARGET':<{widths['tg_id']}} | {'CLR':<{widths['tg_clr']}} | "
        f"{'SUPPORTS':^{widths['flag']}} | {'CAN_LOAD':^{widths['flag']}}"
    )
    sep = "-" * len(header)

    def flag(v: Any) -> str:
        return "✓" if v is True else ("✗" if v is False else "·")

    out_lines = [header, sep]
    shown = 0
    for r in rows:
        if shown >= max_rows:
            break
        av = r["available"] or {}
        tg = r["target"] or {}
        line = (
            f"{r['index']:>{widths['idx']}} | "
            f"{_trim(str(av.get('id', '—')), widths['av_id']):<{widths['av_id']}} | "
            f"{_trim(str(av.get('clr_version', '—')), widths['av_clr']):<{widths['av_clr']}} | "
            f"{_trim(str(tg.get('id', '—')), widths['tg_id']):<{widths['tg_id']}} | "
            f"{_trim(str(tg.get('clr_version', '—')), widths['tg_clr']):<{widths['tg_clr']}} | "
            f"{flag(r.get('supports')):^{widths['flag']}} | {flag(r.get('can_load')):^{widths['flag']}}"
        )
        out_lines.append(line)
        shown += 1

    if shown < len(rows):
        out_lines.append(f"... ({len(rows) - shown} more rows)")
    return "\n".join(out_lines)


def _selections(service: RuntimeFrameworkService, targets: Sequence[RuntimeFramework]) -> Dict[str, Optional[str]]:
    out: Dict[str, Optional[str]] = {}
    for t in targets:
        chosen = service.select_runtime_framework(t)
        out[t.id] = chosen.id if chosen is not None else None
    return out


def build_json_report(
    service: RuntimeFrameworkService,
    targets: Sequence[RuntimeFramework],
) -> Dict[str, Any]:
    available = service.available_frameworks
    return {
        "available": [_framework_to_dict(f) for f in available],
        "targets": [_framework_to_dict(t) for t in targets],
        "rows": build_compatibility_rows(available, targets),
        "selected": _selections(service, targets),
    }


def format_text_report(
    service: RuntimeFrameworkService,
    targets: Sequence[RuntimeFramework],
    *,
    max_rows: int = 50,
    title: Optional[str] = None,
) -> str:
    available = service.available_frameworks
    lines: List[str] = []
    lines.append("=" * 80)
    lines.append(title or "Runtime Framework Compatibility")
    lines.append("=" * 80)
    lines.append("Available frameworks:")
    if not available:
        lines.append("  (none)")
    for f in available:
        lines.append(f"  - {f.id}: {f.display_name} (CLR {f.clr_version})")

    lines.append("")
    lines.append("Selection:")
    for target_id, chosen in _selections(service, targets).items():
        lines.append(f"  {target_id} -> {chosen or '(no suitable framework)'}")

    lines.append("")
    lines.append("Compatibility matrix:")
    lines.append(format_compatibility_table(build_compatibility_rows(available, targets), max_rows=max_rows))
    lines.append("=" * 80)
    return "\n".join(lines)
