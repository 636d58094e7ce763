"""Shared fixtures for jsonenvelope tests."""
import logging
import os

import pytest

from jsonenvelope.core import CatalogTranslator, ResponseEnvelope


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Settings are read from JSONENVELOPE_* variables; start every test without them."""
    for key in list(os.environ):
        if key.startswith("JSONENVELOPE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def envelope():
    return ResponseEnvelope()


@pytest.fixture
def translator():
    return CatalogTranslator({"user.saved": "User saved", "form.invalid": "Please correct the form"})


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """configure_logging() replaces handlers and stops propagation; undo it so caplog keeps working."""
    logger = logging.getLogger("jsonenvelope")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
