import json
import os
import tempfile

from secretkit.config import DEFAULTS, load_config, save_config, options_from_config, config_path
from secretkit.pool import GenerationOptions


def test_missing_file_gives_defaults():
    with tempfile.TemporaryDirectory() as td:
        cfg = load_config(os.path.join(td, "nope.json"))
        assert cfg == DEFAULTS

def test_save_and_load_merges_defaults():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "sub", "config.json")
        save_config({"length": 24, "numbers": True}, path)
        cfg = load_config(path)
        assert cfg["length"] == 24
        assert cfg["numbers"] is True
        assert cfg["otp_length"] == DEFAULTS["otp_length"]

def test_corrupt_file_falls_back(caplog):
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")
        assert load_config(path) == DEFAULTS
        assert "ignoring" in caplog.text

def test_non_object_falls_back():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump([1, 2], f)
        assert load_config(path) == DEFAULTS

def test_options_from_config():
    cfg = dict(DEFAULTS, length=16, symbols="%&", strict=True)
    opts = options_from_config(cfg)
    assert opts == GenerationOptions(length=16, symbols="%&", strict=True)

def test_env_overrides_path(monkeypatch):
    monkeypatch.setenv("SECRETKIT_CONFIG", "/tmp/elsewhere.json")
    assert config_path() == "/tmp/elsewhere.json"
