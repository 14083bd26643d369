"""Tests for the logging manager."""

import logging

from dropfour.debug import DebugLevel, DebugManager


def make_manager(name, **kwargs):
    manager = DebugManager(name)
    manager.configure(**kwargs)
    return manager


def test_level_filtering(caplog):
    manager = make_manager("dropfour.test.levels", level=DebugLevel.INFO)
    with caplog.at_level(logging.DEBUG, logger="dropfour.test.levels"):
        manager.info("shown", "game")
        manager.debug("hidden", "game")

    messages = [r.getMessage() for r in caplog.records]
    assert "[game] shown" in messages
    assert all("hidden" not in m for m in messages)


def test_component_filtering(caplog):
    manager = make_manager("dropfour.test.components", level=DebugLevel.DEBUG, components=["board"])
    with caplog.at_level(logging.DEBUG, logger="dropfour.test.components"):
        manager.debug("kept", "board")
        manager.debug("dropped", "game")

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["[board] kept"]


def test_disabled(caplog):
    manager = make_manager("dropfour.test.disabled", level=DebugLevel.TRACE, enabled=False)
    with caplog.at_level(logging.DEBUG, logger="dropfour.test.disabled"):
        manager.error("nothing")
    assert not caplog.records


def test_trace_prefix(caplog):
    manager = make_manager("dropfour.test.trace", level=DebugLevel.TRACE)
    with caplog.at_level(logging.DEBUG, logger="dropfour.test.trace"):
        manager.trace("deep")
    assert caplog.records[0].getMessage() == "TRACE: deep"


def test_timer():
    manager = make_manager("dropfour.test.timer")
    manager.start_timer("scan")
    assert manager.end_timer("scan") >= 0
    assert manager.end_timer("scan") is None


def test_set_from_string():
    manager = make_manager("dropfour.test.strings")
    assert manager.set_from_string("Debug")
    assert manager.level == DebugLevel.DEBUG
    assert not manager.set_from_string("loud")
    assert manager.level == DebugLevel.DEBUG


def test_log_file(tmp_path):
    path = tmp_path / "game.log"
    manager = make_manager("dropfour.test.file", level=DebugLevel.INFO, log_file=str(path))
    manager.info("written", "game")
    manager.configure(log_file="")
    assert "[game] written" in path.read_text()
