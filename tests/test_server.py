import logging

import pytest

from model_bridge.config import Settings
from model_bridge.core.resolver import StaticOverrideProvider
from model_bridge.server import configure_logging, create_app


@pytest.fixture
def root_level():
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


def test_configure_logging_changes_level_on_every_call(root_level):
    configure_logging("WARNING")
    assert root_level.level == logging.WARNING
    configure_logging("DEBUG")
    assert root_level.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(root_level):
    configure_logging("chatty")
    assert root_level.level == logging.INFO


def test_create_app_applies_settings_log_level(root_level):
    create_app(Settings(log_level="ERROR"), StaticOverrideProvider(None))
    assert root_level.level == logging.ERROR
    create_app(Settings(log_level="debug"), StaticOverrideProvider(None))
    assert root_level.level == logging.DEBUG
