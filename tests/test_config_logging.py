"""
Tests for environment-driven settings and logging setup.
"""

import importlib
import logging

import pytest

from automytee_api.app.core import config
from automytee_api.app.core.logging_config import (
    CONSOLE_HANDLER,
    FILE_HANDLER,
    NOISY_LOGGERS,
    _own_handlers,
    setup_logging,
)


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config).settings

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_settings_read_environment(reload_config):
    settings = reload_config(
        MONGODB_URI="mongodb://db.internal:27017",
        MONGODB_DB="showcase",
        PROJECTS_LIST_LIMIT="25",
        DEBUG="yes",
    )

    assert settings.mongodb_uri == "mongodb://db.internal:27017"
    assert settings.mongodb_db == "showcase"
    assert settings.projects_list_limit == 25
    assert settings.debug is True


def test_settings_defaults(reload_config, monkeypatch):
    for key in ("MONGODB_DB", "PROJECTS_LIST_LIMIT", "MONGODB_TIMEOUT_MS", "API_PORT", "DEBUG"):
        monkeypatch.delenv(key, raising=False)

    settings = reload_config()

    assert settings.mongodb_db == "automytee"
    assert settings.projects_list_limit == 10
    assert settings.mongodb_timeout_ms == 5000
    assert settings.api_port == 8000
    assert settings.debug is False

@pytest.fixture
def root_logger():
    """Root logger with this service's handlers detached for the test.

    Handlers installed by other parties (the test runner's capture
    handlers) stay attached; ``setup_logging`` must ignore them.
    """
    root = logging.getLogger()
    saved_own = _own_handlers(root)
    saved_levels = {name: logging.getLogger(name).level for name in ("",) + NOISY_LOGGERS}
    for handler in saved_own:
        root.removeHandler(handler)
    yield root
    for handler in _own_handlers(root):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_own:
        root.addHandler(handler)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


def test_setup_logging_console_only(root_logger):
    setup_logging("debug")

    assert root_logger.level == logging.DEBUG
    assert [h.get_name() for h in _own_handlers(root_logger)] == [CONSOLE_HANDLER]


def test_setup_logging_ignores_foreign_handlers(root_logger):
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)
    try:
        setup_logging("INFO")
    finally:
        root_logger.removeHandler(foreign)

    assert len(_own_handlers(root_logger)) == 1


def test_setup_logging_writes_file(root_logger, tmp_path):
    logfile = tmp_path / "logs" / "api.log"

    setup_logging("INFO", str(logfile))
    logging.getLogger("automytee.test").info("hello from the test")
    for handler in _own_handlers(root_logger):
        handler.flush()

    assert [h.get_name() for h in _own_handlers(root_logger)] == [CONSOLE_HANDLER, FILE_HANDLER]
    assert "[INFO] automytee.test: hello from the test" in logfile.read_text(encoding="utf-8")


def test_second_call_adjusts_level_without_duplicating_handlers(root_logger):
    setup_logging("INFO")
    setup_logging("WARNING")

    assert len(_own_handlers(root_logger)) == 1
    assert root_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("chatty")

    assert root_logger.level == logging.INFO


def test_driver_loggers_are_quiet_by_default(root_logger):
    setup_logging("DEBUG")

    assert root_logger.level == logging.DEBUG
    assert logging.getLogger("pymongo").level == logging.WARNING
    assert logging.getLogger("pymongo.command").getEffectiveLevel() == logging.WARNING


def test_debug_flag_overrides_level_and_unmutes_driver(root_logger):
    setup_logging("WARNING", debug=True)

    assert root_logger.level == logging.DEBUG
    assert logging.getLogger("pymongo").level == logging.DEBUG
