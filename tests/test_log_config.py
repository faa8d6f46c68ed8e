import logging
from logging.handlers import RotatingFileHandler

import pytest

from caspersdk import log_config
from caspersdk.log_config import (
    LogConfig,
    LogConfigurator,
    Severity,
    Sink,
    get_level,
    init_default,
)

_LOWEST_SEVERITY = next(iter(Severity))


def _close(logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.mark.parametrize(
    "severity, level",
    [
        (Severity.debug, logging.DEBUG),
        (Severity.info, logging.INFO),
        (Severity.warn, logging.WARNING),
        (Severity.err, logging.ERROR),
        (Severity.critical, logging.CRITICAL),
    ],
)
def test_get_level(severity, level):
    assert get_level(severity) == level


def test_lowest_and_off_bracket_standard_levels():
    assert get_level(_LOWEST_SEVERITY) < logging.DEBUG
    assert get_level(Severity.off) > logging.CRITICAL
    assert get_level(Severity.n_levels) == get_level(Severity.off)


def test_get_level_unknown_falls_back_to_lowest():
    assert get_level("bogus") == get_level(_LOWEST_SEVERITY)
    assert get_level("bogus") < logging.DEBUG


def test_console_logger_writes_to_stdout(capsys):
    logger = init_default(LogConfig("sdk_console_test", Severity.info, Sink.console))
    try:
        logger.info("console message")
        logger.debug("hidden message")
        out = capsys.readouterr().out
        assert "console message" in out
        assert "hidden message" not in out
        assert "[sdk_console_test]" in out
    finally:
        _close(logger)


def test_reconfigure_replaces_handler(capsys):
    configurator = LogConfigurator("sdk_reconfigure_test")
    configurator.configure(LogConfig("ignored", Severity.info, Sink.console))
    logger = configurator.configure(LogConfig("ignored", Severity.err, Sink.console))
    try:
        assert len(logger.handlers) == 1
        assert logger.name == "sdk_reconfigure_test"
        logger.warning("filtered out")
        assert "filtered out" not in capsys.readouterr().out
    finally:
        _close(logger)


def test_rotating_logger_writes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    logger = LogConfigurator("sdk_file_test").configure(
        LogConfig("sdk_file_test", Severity.debug, Sink.rotating)
    )
    try:
        handler = logger.handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 1048576 * 5
        assert handler.backupCount == 10
        logger.debug("file message")
        handler.flush()
        path = tmp_path / "logs" / "rotating_sdk_file_test.txt"
        assert "file message" in path.read_text(encoding="utf-8")
    finally:
        _close(logger)


def test_default_config_values():
    config = LogConfig()
    assert config.sink is Sink.console
    assert get_level(config.severity) == log_config.logging.INFO