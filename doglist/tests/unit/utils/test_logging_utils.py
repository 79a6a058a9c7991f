from __future__ import annotations

import logging

import pytest

from doglist.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("DOGLIST_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DOGLIST_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_configure_root_uses_default_level() -> None:
    assert logging_utils.configure_root(logging.WARNING) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_configure_root_accepts_level_name() -> None:
    assert logging_utils.configure_root("error") == logging.ERROR


def test_env_level_overrides_default(monkeypatch) -> None:
    monkeypatch.setenv("DOGLIST_LOG_LEVEL", "debug")

    assert logging_utils.configure_root(logging.WARNING) == logging.DEBUG
    assert logging_utils.env_requests_debug() is True


def test_numeric_env_level(monkeypatch) -> None:
    monkeypatch.setenv("DOGLIST_LOG_LEVEL", "30")

    assert logging_utils.configure_root() == logging.WARNING
    assert logging_utils.env_requests_debug() is False


def test_debug_flag_forces_debug(monkeypatch) -> None:
    monkeypatch.setenv("DOGLIST_DEBUG", "yes")

    assert logging_utils.configure_root() == logging.DEBUG


def test_unknown_env_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("DOGLIST_LOG_LEVEL", "chatty")

    assert logging_utils.configure_root(logging.ERROR) == logging.INFO


def test_non_ascii_digit_env_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("DOGLIST_LOG_LEVEL", "²")

    assert logging_utils.configure_root(logging.ERROR) == logging.INFO


def test_parse_level() -> None:
    assert logging_utils.parse_level("warning", logging.INFO) == logging.WARNING
    assert logging_utils.parse_level(" 15 ", logging.INFO) == 15
    assert logging_utils.parse_level("²", logging.ERROR) == logging.ERROR
    assert logging_utils.parse_level(None, logging.ERROR) == logging.ERROR
    assert logging_utils.parse_level("loud", logging.ERROR) == logging.ERROR


def test_resolve_env_level_reads_given_mapping() -> None:
    assert logging_utils.resolve_env_level({}) is None
    assert logging_utils.resolve_env_level({"DOGLIST_DEBUG": "on"}) == logging.DEBUG
    assert logging_utils.resolve_env_level({"DOGLIST_DEBUG": "off"}) is None
    assert (
        logging_utils.resolve_env_level({"DOGLIST_LOG_LEVEL": "error", "DOGLIST_DEBUG": "1"})
        == logging.ERROR
    )
    assert logging_utils.env_requests_debug({"DOGLIST_LOG_LEVEL": "10"}) is True


def test_level_name() -> None:
    assert logging_utils.level_name(logging.INFO) == "INFO"
    assert logging_utils.env_requests_debug() is False
