"""
Unit tests for settings and logger setup.
"""

import json
import sys

import pytest

from import_sort_config.config_loader import get_settings
from import_sort_config.log import LoggingFormat, get_logger, setup_logger


@pytest.fixture
def restore_logger():
    yield
    logger = get_logger()
    logger.remove(None)
    logger.add(sys.stderr)


def test_bundled_settings():
    """Test that the bundled configuration is loaded."""
    settings = get_settings()

    assert settings.import_sort.module_name == "importsort"
    assert settings.import_sort.package_prop == "importSort"
    assert settings.config.log_format == "CONSOLE"


def test_json_logging(capsys, restore_logger):
    """Test that JSON logging writes one serialized record per line."""
    logger = setup_logger("DEBUG", LoggingFormat.JSON)

    logger.info("Resolved import-sort configuration", extra={"style": "/lib/style.py"})

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["text"].strip() == "Resolved import-sort configuration"


def test_level_filtering(capsys, restore_logger):
    """Test that records below the configured level are dropped."""
    logger = setup_logger("WARNING", LoggingFormat.JSON)

    logger.info("hidden")
    logger.warning("shown")

    output = capsys.readouterr().out
    assert "hidden" not in output
    assert "shown" in output


def test_unknown_level_falls_back_to_info(capsys, restore_logger):
    """Test that an unknown level name behaves like INFO."""
    logger = setup_logger("chatty", LoggingFormat.JSON)

    logger.debug("hidden")
    logger.info("shown")

    output = capsys.readouterr().out
    assert "hidden" not in output
    assert "shown" in output


def test_defaults_from_settings(restore_logger):
    """Test that setup without arguments uses the configured level and format."""
    assert setup_logger() is get_logger()
