import json
import os

import pytest

from acts.catalog import TESTS
from front import app as app_module
from runner.errors import RunError


@pytest.fixture
def client(config, monkeypatch):
    os.makedirs(config.script_dir)
    os.makedirs(config.batch_dir)
    with open(os.path.join(config.script_dir, "tp1.json"), "w", encoding="utf-8") as f:
        json.dump({"what": "first script", "commands": []}, f)
    with open(os.path.join(config.batch_dir, "orgs.json"), "w", encoding="utf-8") as f:
        json.dump({"what": "some orgs", "hosts": []}, f)
    monkeypatch.setattr(app_module, "CONFIG", config)
    return app_module.app.test_client()


def test_catalog(client):
    resp = client.get("/api/catalog")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["ok"] is True
    assert data["scripts"] == [["tp1", "first script"]]
    assert data["batches"] == [["None", "Perform the script without a batch"], ["orgs", "some orgs"]]
    assert data["tests"] == TESTS


def test_run_requires_script_name(client):
    resp = client.post("/api/run", json={})
    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False


def test_run_missing_script(client, monkeypatch):
    def fail(cfg, script_name, batch_name, time_stamp):
        raise RunError("SCRIPT_NOT_FOUND", "load_script", f"script not found: {script_name}")

    monkeypatch.setattr(app_module, "_run_in_new_loop", fail)
    resp = client.post("/api/run", json={"scriptName": "ghost"})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["code"] == "SCRIPT_NOT_FOUND"
    assert "ghost" in body["error"]
