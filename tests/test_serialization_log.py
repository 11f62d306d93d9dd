import logging

import pytest

from verbosity_bridge.backends import serialization_log


@pytest.mark.parametrize(
    "setter, level",
    [
        (serialization_log.set_none, serialization_log.LEVEL_NONE),
        (serialization_log.set_error, serialization_log.LEVEL_ERROR),
        (serialization_log.set_warn, serialization_log.LEVEL_WARN),
        (serialization_log.set_info, serialization_log.LEVEL_INFO),
        (serialization_log.set_debug, serialization_log.LEVEL_DEBUG),
        (serialization_log.set_trace, serialization_log.LEVEL_TRACE),
    ],
)
def test_setters(setter, level):
    setter()
    assert serialization_log.level == level


def test_is_enabled_follows_level():
    serialization_log.set_warn()

    assert serialization_log.get_level_name() == "WARN"
    assert serialization_log.is_enabled(serialization_log.LEVEL_ERROR)
    assert serialization_log.is_enabled(serialization_log.LEVEL_WARN)
    assert not serialization_log.is_enabled(serialization_log.LEVEL_INFO)


def test_set_level_rejects_unknown_values():
    with pytest.raises(ValueError):
        serialization_log.set_level(0)


def test_enabled_messages_are_forwarded(caplog):
    serialization_log.set_info()

    with caplog.at_level(logging.DEBUG, logger="verbosity_bridge.serialization"):
        serialization_log.debug("not shown")
        serialization_log.info("record class registered")
        serialization_log.error("buffer underflow")

    assert [record.getMessage() for record in caplog.records] == [
        "INFO: record class registered",
        "ERROR: buffer underflow",
    ]
    assert [record.levelno for record in caplog.records] == [logging.INFO, logging.ERROR]


def test_none_silences_everything(caplog):
    serialization_log.set_none()

    with caplog.at_level(logging.DEBUG, logger="verbosity_bridge.serialization"):
        serialization_log.error("hidden")

    assert caplog.records == []
