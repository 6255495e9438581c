import json
from pathlib import Path

import pytest
from runtimeframework.io import load_config, build_from_config, build_frameworks
from runtimeframework.core.errors import FrameworkFormatError, InvalidArgumentError
from runtimeframework.core.service import ServiceStatus
from runtimeframework.core.version import Version

def test_build_from_json_config(tmp_path: Path):
    cfg = {
        "frameworks": [
            "net-2.0",
            {"id": "net-4.5", "profile": "Client"},
            {"framework_name": ".NETFramework,Version=v4.0,Profile=Client"},
            {"id": "mono-4.0", "clr_version": "4.0.30319.42000", "display_name": "Mono 4.0 (system)"},
        ]
    }
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text(json.dumps(cfg), encoding="utf-8")

    loaded = load_config(cfg_path)
    service = build_from_config(loaded)
    assert service.status is ServiceStatus.STARTED
    by_id = {f.id: f for f in service.available_frameworks}
    assert set(by_id) == {"net-2.0", "net-4.5", "net-4.0", "mono-4.0"}
    assert by_id["net-4.5"].display_name == ".NET 4.5 - Client"
    assert by_id["net-4.0"].profile == "Client"
    assert by_id["mono-4.0"].clr_version == Version(4, 0, 30319, 42000)
    assert by_id["mono-4.0"].display_name == "Mono 4.0 (system)"

def test_build_from_yaml_config(tmp_path: Path):
    pytest.importorskip("yaml")
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "frameworks:\n"
        "  - net-3.5\n"
        "  - id: net-4.0\n"
        "    clr_version: \"4.0\"\n",
        encoding="utf-8",
    )
    frameworks = build_frameworks(load_config(cfg_path))
    assert [f.id for f in frameworks] == ["net-3.5", "net-4.0"]
    assert frameworks[1].clr_version == Version(4, 0)

def test_build_without_start():
    service = build_from_config({"frameworks": ["net-2.0"]}, start=False)
    assert service.status is ServiceStatus.STOPPED

def test_empty_config(tmp_path: Path):
    cfg_path = tmp_path / "empty.json"
    cfg_path.write_text("", encoding="utf-8")
    assert build_frameworks(load_config(cfg_path)) == []

@pytest.mark.parametrize("cfg, exc", [
    ({"frameworks": "net-2.0"}, ValueError),
    ({"frameworks": [42]}, ValueError),
    ({"frameworks": [{"profile": "Client"}]}, ValueError),
    ({"frameworks": ["net2.0"]}, FrameworkFormatError),
    ({"frameworks": ["net-4.5.3"]}, InvalidArgumentError),
])
def test_bad_entries(cfg, exc):
    with pytest.raises(exc):
        build_frameworks(cfg)

def test_yaml_unquoted_clr_version_rejected(tmp_path: Path):
    pytest.importorskip("yaml")
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "frameworks:\n"
        "  - id: mono-2.0\n"
        "    clr_version: 2.10\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="quoted"):
        build_frameworks(load_config(cfg_path))

def test_yaml_quoted_clr_version_kept(tmp_path: Path):
    pytest.importorskip("yaml")
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "frameworks:\n"
        "  - id: mono-2.0\n"
        "    clr_version: \"2.10\"\n",
        encoding="utf-8",
    )
    frameworks = build_frameworks(load_config(cfg_path))
    assert frameworks[0].clr_version == Version(2, 10)

def test_invalid_yaml_raises_value_error(tmp_path: Path):
    pytest.importorskip("yaml")
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("frameworks: [net-2.0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(cfg_path)
