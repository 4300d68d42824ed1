from __future__ import annotations

import logging

import pytest

from yearwheel.utils.logging import (
    HTTP_LOGGERS,
    apply_preferences,
    configure_root,
    env_forces_debug,
    env_level,
    parse_level,
)


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    previous = root.level
    http_previous = {name: logging.getLogger(name).level for name in HTTP_LOGGERS}
    yield root
    root.setLevel(previous)
    for name, level in http_previous.items():
        logging.getLogger(name).setLevel(level)


def test_configure_root_uses_default_without_env(monkeypatch, restore_root_level) -> None:
    monkeypatch.delenv("YEARWHEEL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("YEARWHEEL_DEBUG", raising=False)

    assert configure_root(logging.WARNING) == logging.WARNING
    assert configure_root("error") == logging.ERROR
    assert restore_root_level.level == logging.ERROR
    assert env_forces_debug() is False


def test_level_env_var_wins(monkeypatch, restore_root_level) -> None:
    monkeypatch.setenv("YEARWHEEL_LOG_LEVEL", "debug")
    monkeypatch.setenv("YEARWHEEL_DEBUG", "0")

    assert configure_root(logging.WARNING) == logging.DEBUG
    assert apply_preferences(False) == logging.DEBUG
    assert env_forces_debug() is True


def test_debug_flag_and_numeric_levels(monkeypatch, restore_root_level) -> None:
    monkeypatch.delenv("YEARWHEEL_LOG_LEVEL", raising=False)
    monkeypatch.setenv("YEARWHEEL_DEBUG", "true")
    assert configure_root() == logging.DEBUG

    monkeypatch.setenv("YEARWHEEL_LOG_LEVEL", "30")
    assert configure_root() == logging.WARNING

    monkeypatch.setenv("YEARWHEEL_LOG_LEVEL", "nonsense")
    assert configure_root() == logging.INFO


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("15", 15),
        (logging.ERROR, logging.ERROR),
        ("", logging.INFO),
        (None, logging.INFO),
        ("loud", logging.INFO),
    ],
)
def test_parse_level(value, expected) -> None:
    assert parse_level(value) == expected


def test_env_level_reads_an_explicit_mapping() -> None:
    assert env_level({}) is None
    assert env_level({"YEARWHEEL_DEBUG": "yes"}) == logging.DEBUG
    assert env_level({"YEARWHEEL_DEBUG": "no"}) is None
    assert env_level({"YEARWHEEL_LOG_LEVEL": "error", "YEARWHEEL_DEBUG": "1"}) == logging.ERROR
    assert env_forces_debug({"YEARWHEEL_LOG_LEVEL": "10"}) is True
    assert env_forces_debug({"YEARWHEEL_LOG_LEVEL": "info"}) is False


def test_http_loggers_follow_debug_toggle(monkeypatch, restore_root_level) -> None:
    monkeypatch.delenv("YEARWHEEL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("YEARWHEEL_DEBUG", raising=False)

    assert apply_preferences(True) == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.DEBUG

    assert apply_preferences(False) == logging.INFO
    assert restore_root_level.level == logging.INFO
    assert {logging.getLogger(name).level for name in HTTP_LOGGERS} == {logging.WARNING}
