from __future__ import annotations

from fp_config import DEFAULT_PORT, ServerConfig


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "FP_DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config = ServerConfig()
    assert config.port == DEFAULT_PORT == 8080
    assert config.host == "0.0.0.0"
    assert config.debug is False
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("FP_DEBUG", "Yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = ServerConfig()
    assert config.port == 9000
    assert config.host == "127.0.0.1"
    assert config.debug is True
    assert config.log_level == "DEBUG"


def test_bad_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    assert ServerConfig().port == DEFAULT_PORT
