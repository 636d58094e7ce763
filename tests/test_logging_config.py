import logging

from jsonenvelope.logging_config import configure_logging


def test_configure_logging_uses_level_argument():
    configure_logging("debug")
    logger = logging.getLogger("jsonenvelope")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_configure_logging_reads_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    configure_logging()
    configure_logging()
    logger = logging.getLogger("jsonenvelope")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
