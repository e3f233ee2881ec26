"""Tests for the logging manager."""

import logging

import pytest

from connect4.debug import DebugLevel, DebugManager


@pytest.fixture
def manager():
    return DebugManager(name="connect4.tests", level=DebugLevel.DEBUG)


def test_messages_tagged_with_component(manager, caplog):
    with caplog.at_level(logging.DEBUG, logger="connect4.tests"):
        manager.info("engine started", "engine")
    assert "[engine] engine started" in caplog.text


def test_level_filters_messages(manager, caplog):
    manager.configure(level=DebugLevel.WARNING)
    with caplog.at_level(logging.DEBUG, logger="connect4.tests"):
        manager.info("hidden")
        manager.warning("shown")
    assert "hidden" not in caplog.text
    assert "shown" in caplog.text


def test_none_level_silences_everything(manager, caplog):
    manager.configure(level=DebugLevel.NONE)
    with caplog.at_level(logging.DEBUG, logger="connect4.tests"):
        manager.error("nothing")
    assert caplog.text == ""


def test_component_filter(manager, caplog):
    manager.configure(components=["cli"])
    with caplog.at_level(logging.DEBUG, logger="connect4.tests"):
        manager.debug("from engine", "engine")
        manager.debug("from cli", "cli")
    assert "from engine" not in caplog.text
    assert "from cli" in caplog.text


def test_disabled_manager(manager, caplog):
    manager.configure(enabled=False)
    with caplog.at_level(logging.DEBUG, logger="connect4.tests"):
        manager.error("nothing")
    assert caplog.text == ""


def test_trace_logged_as_debug(manager, caplog):
    manager.configure(level=DebugLevel.TRACE)
    with caplog.at_level(logging.DEBUG, logger="connect4.tests"):
        manager.trace("deep detail")
    assert "TRACE: deep detail" in caplog.text


def test_set_from_string(manager):
    assert manager.set_from_string("Info")
    assert manager.level is DebugLevel.INFO
    assert not manager.set_from_string("verbose")
    assert manager.level is DebugLevel.INFO


def test_timers(manager):
    manager.start_timer("work")
    elapsed = manager.end_timer("work")
    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("work") is None


def test_log_file(manager, tmp_path):
    log_file = tmp_path / "debug.log"
    manager.configure(log_file=str(log_file))
    manager.error("written to file")
    manager.configure(log_file="")
    assert "written to file" in log_file.read_text()
