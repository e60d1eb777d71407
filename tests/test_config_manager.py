# tests/test_config_manager.py

import json

import pytest

from word_autocompleter.utils.config_manager import DEFAULTS, Config


def test_defaults_written_on_first_use(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS
    assert cfg.max_suggestions == 10


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"corpus_path": "other.txt"}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("corpus_path") == "other.txt"
    assert cfg.get("log_level") == "INFO"


def test_unreadable_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert cfg.set("max_suggestions", "3") == 3
    assert cfg.set("autosave", "yes") is True
    saved = json.loads(path.read_text(encoding="utf8"))
    assert saved["max_suggestions"] == 3
    assert saved["autosave"] is True
    assert cfg.max_suggestions == 3


def test_set_rejects_unknown_key_and_bad_value(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "lots")


def test_max_suggestions_clamped(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    cfg.set("max_suggestions", 50)
    assert cfg.max_suggestions == 10
    cfg.set("max_suggestions", 0)
    assert cfg.max_suggestions == 1
