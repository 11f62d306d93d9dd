"""Top-level package for verbosity-bridge.

One verbosity setting is propagated to every logging backend the toolkit
depends on:

* :mod:`.core` – the verbosity levels, their lookup tables and the propagator.
* :mod:`.backends` – the loguru live context, the toolkit ``Log`` facade and
  the serialization layer's level switch.
* :mod:`.utils` – console logging setup and configuration loading.
"""

from .core.levels import VerbosityLevel
from .core.propagator import VerbosityPropagator, set_logging_file, set_logging_level
from .errors import UnimplementedLevelError, VerbosityBridgeError

__all__ = [
    "VerbosityLevel",
    "VerbosityPropagator",
    "set_logging_level",
    "set_logging_file",
    "UnimplementedLevelError",
    "VerbosityBridgeError",
]
