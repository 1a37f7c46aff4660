# tests/test_config.py
from app.config import DEFAULT_PORT, Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "API_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.port == DEFAULT_PORT == 3000
    assert s.api_key is None
    assert s.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8085")
    monkeypatch.setenv("API_KEY", "s3cret")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.port == 8085
    assert s.api_key == "s3cret"
    assert s.log_level == "DEBUG"


def test_bad_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    assert Settings.from_env().port == DEFAULT_PORT


def test_empty_api_key_counts_as_unset(monkeypatch):
    monkeypatch.setenv("API_KEY", "")
    assert Settings.from_env().api_key is None


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert Settings.from_env().log_level == "INFO"


def test_logger_level_comes_from_configure():
    import logging

    from app.logger import configure, get_logger

    configure("debug")
    assert get_logger().level == logging.DEBUG
    configure("verbose")
    assert get_logger().level == logging.INFO
    assert get_logger("api").name == "product_api.api"


def test_logger_import_ignores_environment(monkeypatch):
    import importlib
    import logging

    import app.logger

    monkeypatch.setenv("LOG_LEVEL", "verbose")
    reloaded = importlib.reload(app.logger)
    assert reloaded.get_logger().level == logging.INFO
