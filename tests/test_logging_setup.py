import logging
import warnings

import pytest

from verbosity_bridge.core.levels import FINEST, VerbosityLevel
from verbosity_bridge.utils.logging import CONSOLE_FORMAT, setup_logging


@pytest.fixture
def saved_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    logging.captureWarnings(False)
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def _console(root):
    consoles = [h for h in root.handlers if type(h) is logging.StreamHandler]
    assert len(consoles) == 1
    return consoles[0]


@pytest.mark.parametrize(
    "verbosity, level",
    [
        (VerbosityLevel.DEBUG, FINEST),
        (VerbosityLevel.INFO, logging.INFO),
        (VerbosityLevel.WARNING, logging.WARNING),
        (VerbosityLevel.ERROR, logging.ERROR),
    ],
)
def test_setup_logging_maps_verbosity(saved_root, verbosity, level):
    setup_logging(verbosity)

    console = _console(saved_root)
    assert saved_root.level == level
    assert console.level == level
    assert console.formatter._fmt == CONSOLE_FORMAT


def test_setup_logging_defaults_to_info(saved_root):
    setup_logging()
    assert saved_root.level == logging.INFO


def test_warnings_are_routed_through_logging(saved_root, monkeypatch):
    records = []
    setup_logging(VerbosityLevel.WARNING)
    monkeypatch.setattr(_console(saved_root), "emit", records.append)

    with warnings.catch_warnings():
        warnings.simplefilter("always")
        warnings.warn("index is older than the reads file")

    assert [record.name for record in records] == ["py.warnings"]
