import logging
import sys
from pathlib import Path

import pytest

# Ensure the src layout is importable without installing the package
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from verbosity_bridge.backends import serialization_log
from verbosity_bridge.backends.loguru_context import LoguruContext
from verbosity_bridge.backends.toolkit_log import Log


@pytest.fixture(autouse=True)
def restore_global_levels():
    """Undo changes tests make to the process-wide level switches."""
    toolkit_level = Log.get_global_log_level()
    serialization_level = serialization_log.level
    yield
    Log.set_global_log_level(toolkit_level)
    Log.set_global_print_stream(None)
    serialization_log.set_level(serialization_level)


@pytest.fixture
def loguru_context():
    """A context that leaves loguru's existing handlers alone."""
    context = LoguruContext(console=None, remove_default=False)
    yield context
    context.close()


@pytest.fixture
def root_logger():
    """A throwaway stdlib logger standing in for the root logger."""
    log = logging.getLogger("verbosity_bridge.tests.root")
    log.propagate = False
    yield log
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.setLevel(logging.NOTSET)
    log.propagate = True
