import json

import pytest

from passgauge.config import DEFAULTS, clamp_input, config_path, load_config, save_config, update_config

@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("PASSGAUGE_HOME", str(tmp_path))
    return tmp_path

def test_defaults_when_missing(isolated_home):
    assert config_path().startswith(str(isolated_home))
    assert load_config() == DEFAULTS

def test_save_and_merge():
    save_config({"debounce_ms": 300})
    cfg = load_config()
    assert cfg["debounce_ms"] == 300
    assert cfg["generated_length"] == DEFAULTS["generated_length"]

def test_corrupt_file_falls_back_to_defaults():
    with open(config_path(), "w", encoding="utf-8") as f:
        f.write("{not json")
    assert load_config() == DEFAULTS

def test_update_config_parses_integers():
    cfg = update_config(["generated_length=24", "debounce_ms = 50"])
    assert cfg["generated_length"] == 24
    with open(config_path(), encoding="utf-8") as f:
        assert json.load(f)["debounce_ms"] == 50

def test_update_config_rejects_bad_input():
    with pytest.raises(ValueError):
        update_config(["colour=blue"])
    with pytest.raises(ValueError):
        update_config(["debounce_ms"])
    with pytest.raises(ValueError):
        update_config(["debounce_ms=fast"])
    with pytest.raises(ValueError):
        update_config(["generated_length=0"])

def test_clamp_input():
    cfg = dict(DEFAULTS, max_password_length=8)
    assert clamp_input("short", cfg) == "short"
    assert clamp_input("x" * 20, cfg) == "x" * 8
