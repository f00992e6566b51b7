"""Tests for the settings loader."""

import json

import config


def test_writes_defaults_when_missing(tmp_path):
    path = tmp_path / "settings.json"
    assert config.load_settings(str(path)) == config.DEFAULT_SETTINGS
    assert json.loads(path.read_text()) == config.DEFAULT_SETTINGS


def test_fills_missing_keys(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"interface": "eth1", "ssdp_policy": "unconditional"}))
    s = config.load_settings(str(path))
    assert s["interface"] == "eth1"
    assert s["ssdp_policy"] == "unconditional"
    assert s["igmp_table"] == "/proc/net/igmp"


def test_bad_json_uses_defaults(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert config.load_settings(str(path)) == config.DEFAULT_SETTINGS
    assert "Could not read" in capsys.readouterr().out


def test_unknown_policy_falls_back(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"ssdp_policy": "always"}))
    assert config.load_settings(str(path))["ssdp_policy"] == "validated"
    assert "Unknown ssdp_policy" in capsys.readouterr().out


def test_defaults_not_shared(tmp_path):
    s = config.load_settings(str(tmp_path / "settings.json"))
    s["interface"] = "eth9"
    assert config.DEFAULT_SETTINGS["interface"] == ""


def test_non_object_json_uses_defaults(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("[]")
    assert config.load_settings(str(path)) == config.DEFAULT_SETTINGS
    assert "Could not read" in capsys.readouterr().out


def test_non_string_values_fall_back(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"igmp_table": None, "interface": 3, "ssdp_policy": "unconditional"}))
    s = config.load_settings(str(path))
    assert s["igmp_table"] == "/proc/net/igmp"
    assert s["interface"] == ""
    assert s["ssdp_policy"] == "unconditional"
    assert "Setting 'igmp_table' must be a string" in capsys.readouterr().out
