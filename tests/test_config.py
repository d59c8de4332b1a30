"""Tests for config loading and the CLI."""

import io
import json

import pytest

from textscrub import MatchKind, Severity, VulgarDictionary, VulgarEntry
from textscrub.cli import main
from textscrub.config import create_redactor, load_config, load_from_yaml


YAML = """\
textscrub:
  types: [email, link]
  threshold: [sexual, mean]
  strict_alignment: true
  words:
    - word: dingus
      severity: mean
    - doofus
  allow_list:
    - scunthorpe
"""


# ── Config ───────────────────────────────────────────────────────────

def test_load_config_defaults():
    cfg = load_config({})
    assert cfg["types"] == ()
    assert cfg["custom_pattern"] is None
    assert cfg["threshold"] == Severity.ANY
    assert cfg["strict_alignment"] is False
    assert cfg["words"] == []


def test_load_config_nested():
    cfg = load_config({"textscrub": {
        "types": "ip,link",
        "custom_pattern": "x+",
        "words": [{"word": "dingus", "severity": "mean|mild"}],
        "allow_list": ["hello"],
    }})
    assert cfg["types"] == (MatchKind.LINK, MatchKind.IP)
    assert cfg["custom_pattern"] == "x+"
    assert cfg["words"] == [
        VulgarEntry("dingus", Severity.MEAN | Severity.MILD),
        VulgarEntry("hello", Severity.SAFE),
    ]


def test_load_config_is_idempotent():
    cfg = load_config({"types": ["email"], "words": ["dingus"], "threshold": "profane"})
    assert load_config(cfg) == cfg


def test_load_config_unknown_type():
    with pytest.raises(ValueError):
        load_config({"types": ["phone"]})


def test_load_from_yaml(tmp_path):
    path = tmp_path / "textscrub.yaml"
    path.write_text(YAML, encoding="utf-8")
    cfg = load_from_yaml(path)
    assert cfg["types"] == (MatchKind.LINK, MatchKind.EMAIL)
    assert cfg["threshold"] == Severity.SEXUAL | Severity.MEAN
    assert cfg["strict_alignment"] is True
    assert VulgarEntry("doofus") in cfg["words"]
    assert VulgarEntry("scunthorpe", Severity.SAFE) in cfg["words"]


def test_create_redactor(tmp_path):
    path = tmp_path / "textscrub.yaml"
    path.write_text(YAML, encoding="utf-8")
    d = VulgarDictionary()
    r = create_redactor(load_from_yaml(path), dictionary=d)
    assert r.config.strict_alignment is True
    assert d.lookup("dingus") is Severity.MEAN
    # doofus is INAPPROPRIATE, which overlaps the threshold on "mean"
    result = r.censor("dingus doofus at a@b.co")
    assert result.censored == "d***** d***** at ******"


def test_create_redactor_threshold_filters():
    d = VulgarDictionary()
    r = create_redactor({"threshold": "sexual", "words": [{"word": "dingus", "severity": "mean"}]}, d)
    assert r.censor("dingus").censored == "dingus"


# ── CLI ──────────────────────────────────────────────────────────────

def _run(monkeypatch, argv, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    return main(argv)


def test_cli_censor(monkeypatch, capsys):
    code = _run(monkeypatch, ["censor", "--types", "ip"], "ip leak 127.0.0.1\n")
    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"original": "ip leak 127.0.0.1", "censored": "ip leak *********", "changed": True}


def test_cli_censor_custom(monkeypatch, capsys):
    code = _run(monkeypatch, ["censor", "--types", "custom", "--custom-pattern", r"#\d+"], "ticket #42")
    assert code == 0
    assert json.loads(capsys.readouterr().out)["censored"] == "ticket ***"


def test_cli_missing_pattern(monkeypatch, capsys):
    code = _run(monkeypatch, ["censor", "--types", "custom"], "text")
    assert code == 2
    assert "custom_pattern" in capsys.readouterr().err


def test_cli_invalid_pattern(monkeypatch, capsys):
    code = _run(monkeypatch, ["censor", "--types", "custom", "--custom-pattern", "("], "text")
    assert code == 2
    assert "Invalid pattern" in capsys.readouterr().err


def test_cli_with_config(monkeypatch, capsys, tmp_path):
    path = tmp_path / "textscrub.yaml"
    path.write_text(YAML, encoding="utf-8")
    code = _run(monkeypatch, ["--config", str(path), "censor"], "hi dingus, mail x@y.io")
    assert code == 0
    assert json.loads(capsys.readouterr().out)["censored"] == "hi d*****, mail ******"


def test_cli_lookup(monkeypatch, capsys):
    assert _run(monkeypatch, ["lookup", "fuck"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["word"] == "fuck"
    assert "profane" in out["severity"]


def test_cli_lookup_unknown(monkeypatch, capsys):
    assert _run(monkeypatch, ["lookup", "zzqxv"]) == 1
    assert "not in the dictionary" in capsys.readouterr().err
