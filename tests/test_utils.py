"""Essential tests for utility modules - Config and Logging."""

import logging

from tax_address.utils.config import Config
from tax_address.utils.logging import get_logger, setup_logging


def test_config_default_values():
    """Test config provides reasonable defaults."""
    config = Config()  # No .env file

    assert config.get("mongo_db") == "TAX_DIRECTORY"
    assert config.get("countries_collection") == "DIRECTORY_COUNTRY"
    assert config.get("log_level") == "INFO"
    assert config["scope_type"] == "store"
    assert config["street_max_length"] == 100
    assert "country_max_length" in config


def test_config_ignores_environment_without_env_file(monkeypatch):
    monkeypatch.setenv("STREET_MAX_LENGTH", "40")
    assert Config().get("street_max_length") == 100


def test_config_reads_environment_with_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("", encoding="utf-8")
    monkeypatch.setenv("STREET_MAX_LENGTH", "40")
    monkeypatch.setenv("CITY_MAX_LENGTH", "not-a-number")

    config = Config(str(env_file))

    assert config.get("street_max_length") == 40
    assert config.get("city_max_length") == 60


def test_config_loads_env_file(monkeypatch, tmp_path):
    # setenv + delenv makes monkeypatch remove whatever the .env file sets
    monkeypatch.setenv("SCOPE_CODE", "placeholder")
    monkeypatch.delenv("SCOPE_CODE")
    env_file = tmp_path / ".env"
    env_file.write_text("SCOPE_CODE=eu_store\n", encoding="utf-8")

    assert Config(str(env_file)).get("scope_code") == "eu_store"


def test_logging_setup():
    """Test that logging can be set up for CLI usage."""
    logger = setup_logging(level="INFO")

    assert logger.name == "tax_address"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_logging_setup_debug_with_file(tmp_path):
    log_file = tmp_path / "logs" / "tax_address.log"
    logger = setup_logging(level="DEBUG", log_file=str(log_file))

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert log_file.parent.exists()
    for handler in logger.handlers:
        handler.close()


def test_get_logger_names():
    assert get_logger("cli").name == "tax_address.cli"
    assert get_logger("tax_address.address.normalizer").name == "tax_address.address.normalizer"
