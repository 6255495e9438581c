from runtimeframework.core.framework import RuntimeFramework
from runtimeframework.core.service import RuntimeFrameworkService
from runtimeframework.reporting import (
    build_compatibility_rows,
    format_compatibility_table,
    build_json_report,
    format_text_report,
)

def _started(*ids):
    svc = RuntimeFrameworkService([RuntimeFramework.parse(i) for i in ids])
    svc.initialize_service()
    return svc

def test_rows_report_both_predicates():
    available = [RuntimeFramework.parse("net-4.0")]
    targets = [RuntimeFramework.parse("net-2.0"), RuntimeFramework.parse("mono-4.0")]
    rows = build_compatibility_rows(available, targets)
    assert len(rows) == 2
    assert rows[0]["supports"] is False and rows[0]["can_load"] is True
    assert rows[1]["supports"] is True and rows[1]["can_load"] is True
    assert rows[1]["target"]["clr_version"] == "4.0.30319"

def test_table_truncates():
    available = [RuntimeFramework.parse(i) for i in ("net-1.1", "net-2.0", "net-3.5", "net-4.0")]
    rows = build_compatibility_rows(available, [RuntimeFramework.parse("net-2.0")])
    table = format_compatibility_table(rows, max_rows=2)
    lines = table.splitlines()
    assert lines[0].split("|")[1].strip() == "AVAILABLE"
    assert lines[-1] == "... (2 more rows)"
    assert "✓" in table and "✗" in table

def test_json_and_text_reports():
    svc = _started("net-3.5", "net-4.5")
    targets = [RuntimeFramework.parse("net-2.0"), RuntimeFramework.parse("net-4.8")]
    report = build_json_report(svc, targets)
    assert report["selected"] == {"net-2.0": "net-3.5", "net-4.8": None}
    assert len(report["rows"]) == 4

    text = format_text_report(svc, targets, title="Check")
    assert "Check" in text
    assert "net-2.0 -> net-3.5" in text
    assert "net-4.8 -> (no suitable framework)" in text
