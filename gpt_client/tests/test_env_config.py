from __future__ import annotations

import json

from gpt_client.config import DEFAULTS, get_client_config, reset_config_cache
from gpt_client.config.env import is_placeholder, resolve_api_key


def test_defaults_only():
    cfg = get_client_config()
    assert cfg == DEFAULTS
    assert "api_key" not in cfg


def test_api_key_precedence_and_placeholders(monkeypatch):
    monkeypatch.setenv("API_KEY", "sk-last")
    assert resolve_api_key() == ("sk-last", "API_KEY")
    monkeypatch.setenv("OPENAI_API_KEY", "your-key-placeholder")
    assert resolve_api_key() == ("sk-last", "API_KEY")
    monkeypatch.setenv("GPT_API_KEY", "sk-middle")
    assert resolve_api_key() == ("sk-middle", "GPT_API_KEY")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-first")
    assert resolve_api_key() == ("sk-first", "OPENAI_API_KEY")


def test_is_placeholder():
    assert is_placeholder("CHANGEME")
    assert is_placeholder(" test_key ")
    assert is_placeholder("sk-example")
    assert not is_placeholder("sk-real")
    assert not is_placeholder(None)


def test_merge_order_file_env_overrides(monkeypatch, tmp_path):
    path = tmp_path / "client.json"
    path.write_text(json.dumps({"model": "file-model", "max_tokens": 10, "unknown": 1}), encoding="utf-8")
    monkeypatch.setenv("GPT_CLIENT_CONFIG_FILE", str(path))
    cfg = get_client_config()
    assert cfg["model"] == "file-model"
    assert cfg["max_tokens"] == 10
    assert "unknown" not in cfg

    monkeypatch.setenv("OPENAI_MODEL", "env-model")
    assert get_client_config()["model"] == "env-model"
    assert get_client_config({"model": "override", "max_tokens": None}) == {
        "base_url": DEFAULTS["base_url"],
        "model": "override",
        "max_tokens": 10,
    }


def test_yaml_config_file(monkeypatch, tmp_path):
    path = tmp_path / "client.yaml"
    path.write_text("base_url: https://yaml.local/v1\ntemperature: 0.5\n", encoding="utf-8")
    monkeypatch.setenv("GPT_CLIENT_CONFIG_FILE", str(path))
    cfg = get_client_config()
    assert cfg["base_url"] == "https://yaml.local/v1"
    assert cfg["temperature"] == 0.5


def test_dotenv_file_fills_placeholder_values(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("# comment\nOPENAI_API_KEY='sk-dotenv'\n\nOPENAI_MODEL=gpt-4\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    # placeholders are overwritten by the file and restored (unset) on teardown
    monkeypatch.setenv("OPENAI_API_KEY", "placeholder")
    monkeypatch.setenv("OPENAI_MODEL", "placeholder")
    reset_config_cache()
    cfg = get_client_config()
    assert cfg["api_key"] == "sk-dotenv"
    assert cfg["model"] == "gpt-4"
