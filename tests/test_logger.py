"""Tests for the logging wrapper and config resolution."""

import logging

from nginxc.logger import DEFAULT_LOGGER_CONFIG, Logger
from nginxc.utils import resolve_config


def test_resolve_config_overlays_known_keys():
    resolved = resolve_config({"level": logging.DEBUG, "unknown": 1}, DEFAULT_LOGGER_CONFIG)
    assert resolved["level"] == logging.DEBUG
    assert resolved["name"] == DEFAULT_LOGGER_CONFIG["name"]
    assert "unknown" not in resolved


def test_resolve_config_does_not_mutate_defaults():
    resolve_config({"name": "other"}, DEFAULT_LOGGER_CONFIG)
    assert DEFAULT_LOGGER_CONFIG["name"] == "nginxc"


def test_disabled_logger_leaves_shared_logger_alone():
    wrapper = Logger({"name": "nginxc.test.disabled", "is_enabled": False})
    assert not wrapper.is_enabled
    assert not wrapper.logger.disabled
    assert wrapper.logger.handlers == []


def test_enabled_logger_sets_level():
    logger = Logger({"name": "nginxc.test.level", "level": logging.WARNING}).logger
    assert logger.level == logging.WARNING
    assert not logger.disabled


def test_logger_does_not_stack_handlers():
    Logger({"name": "nginxc.test.handlers"})
    logger = Logger({"name": "nginxc.test.handlers"}).logger
    assert len(logger.handlers) == 1


def test_disabled_logger_does_not_silence_enabled_one():
    enabled = Logger({"name": "nginxc.test.toggle"})
    Logger({"name": "nginxc.test.toggle", "is_enabled": False})
    assert enabled.is_enabled
    assert not enabled.logger.disabled
