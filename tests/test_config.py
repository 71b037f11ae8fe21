import json

from geonotes.config import CONFIG_FILENAME, DEFAULT_CONFIG, load_config


def test_defaults_when_missing(tmp_path):
    assert load_config(tmp_path) == DEFAULT_CONFIG


def test_merges_with_defaults(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"latest_limit": 2}), encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg["latest_limit"] == 2
    assert cfg["export_format"] == DEFAULT_CONFIG["export_format"]


def test_invalid_json_falls_back(tmp_path, caplog):
    (tmp_path / CONFIG_FILENAME).write_text("{not json", encoding="utf-8")
    with caplog.at_level("WARNING"):
        cfg = load_config(tmp_path)
    assert cfg == DEFAULT_CONFIG
    assert "Ignoring unreadable config" in caplog.text


def test_defaults_are_not_shared(tmp_path):
    cfg = load_config(tmp_path)
    cfg["latest_limit"] = 99
    assert DEFAULT_CONFIG["latest_limit"] == 5
