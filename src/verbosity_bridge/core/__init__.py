"""Verbosity levels, backend lookup tables and the propagator."""

from .levels import (
    FINEST,
    LOGURU_LEVELS,
    STDLIB_LEVELS,
    VerbosityLevel,
    level_from_loguru_level,
    level_from_stdlib_level,
    level_to_loguru_level,
    level_to_stdlib_level,
)
from .propagator import VerbosityPropagator, set_logging_file, set_logging_level

__all__ = [
    "FINEST",
    "LOGURU_LEVELS",
    "STDLIB_LEVELS",
    "VerbosityLevel",
    "level_from_loguru_level",
    "level_from_stdlib_level",
    "level_to_loguru_level",
    "level_to_stdlib_level",
    "VerbosityPropagator",
    "set_logging_file",
    "set_logging_level",
]
