import json

import pytest

from passgauge import cli
from passgauge.config import load_config

@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("PASSGAUGE_HOME", str(tmp_path))

def test_score_json(capsys):
    assert cli.main(["score", "--json", "Tr0ub4dor&9Zx"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["score"] == 85
    assert out["level"] == "very strong"
    assert out["time_to_crack"] == "Years"
    assert all(out["criteria"].values())

def test_score_prompts_when_password_omitted(monkeypatch, capsys):
    monkeypatch.setattr(cli, "getpass", lambda prompt="": "password")
    assert cli.main(["score", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["score"] == 10

def test_score_renders_report(capsys):
    assert cli.main(["score", "aaaaaaaa"]) == 0
    out = capsys.readouterr().out
    assert "Score: 15 / 100" in out
    assert "No repeating characters" in out
    assert "Suggestions" in out

def test_generate(capsys):
    assert cli.main(["generate", "--length", "20", "--copies", "3"]) == 0
    out = capsys.readouterr().out
    assert out.count("Password #") == 3

def test_generate_too_short(capsys):
    assert cli.main(["generate", "--length", "2"]) == 2
    assert "Cannot generate password" in capsys.readouterr().out

def test_config_set_and_show(capsys):
    assert cli.main(["config", "--set", "debounce_ms=250"]) == 0
    assert load_config()["debounce_ms"] == 250
    assert "debounce_ms" in capsys.readouterr().out

def test_config_rejects_unknown_key(capsys):
    assert cli.main(["config", "--set", "theme=dark"]) == 2

def test_generate_prints_password_verbatim(monkeypatch, capsys):
    # brackets from the special set must not be read as rich markup
    monkeypatch.setattr(cli, "generate_password", lambda length: "Ab1[x]Q9!zz")
    assert cli.main(["generate"]) == 0
    assert "Ab1[x]Q9!zz" in capsys.readouterr().out
