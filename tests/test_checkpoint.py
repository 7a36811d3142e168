import os

from runner.checkpoint import list_whats, read_json, report_path, write_json
from runner.config import RunConfig, get_run_config


def test_report_path_suffix(tmp_path):
    assert report_path(str(tmp_path), "k3x").endswith("report-k3x.json")
    assert report_path(str(tmp_path), "k3x", 7).endswith("report-k3x-007.json")


def test_write_json_creates_parent(tmp_path):
    path = str(tmp_path / "deep" / "report.json")
    write_json(path, {"acts": [{"result": "“Mexico” selected"}]})
    assert read_json(path) == {"acts": [{"result": "“Mexico” selected"}]}


def test_list_whats_sorted(tmp_path):
    write_json(str(tmp_path / "b.json"), {"what": "second"})
    write_json(str(tmp_path / "a.json"), {"what": "first"})
    (tmp_path / "notes.txt").write_text("ignored")
    assert list_whats(str(tmp_path)) == [("a", "first"), ("b", "second")]
    assert list_whats(str(tmp_path / "missing")) == []


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("AUTOTEST_ENV_FILE", str(tmp_path / "absent.env"))
    monkeypatch.setenv("AUTOTEST_SCRIPT_DIR", "/data/scripts")
    monkeypatch.setenv("AUTOTEST_DEBUG", "true")
    monkeypatch.setenv("AUTOTEST_WAITS", "250")
    monkeypatch.chdir(tmp_path)
    cfg = RunConfig.from_env()
    assert cfg.script_dir == "/data/scripts"
    assert cfg.debug is True
    assert cfg.headless is False
    assert cfg.nav_wait_until == "networkidle"
    assert cfg.waits == 250


def test_overrides_skip_none(monkeypatch, tmp_path):
    monkeypatch.setenv("AUTOTEST_ENV_FILE", str(tmp_path / "absent.env"))
    monkeypatch.setenv("AUTOTEST_REPORT_DIR", "/data/reports")
    monkeypatch.chdir(tmp_path)
    cfg = get_run_config({"report_dir": None, "verbose": False})
    assert cfg.report_dir == "/data/reports"
    assert cfg.verbose is False
    assert os.path.isabs(cfg.base_dir)
