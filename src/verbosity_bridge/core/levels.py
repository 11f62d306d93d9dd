#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Verbosity levels and their translation into backend severities.

The toolkit uses :class:`VerbosityLevel` as its single currency for logging
thresholds and converts back and forth between it and the level namespaces of
the backends it drives. Loguru and the toolkit share level names, so table A
is a plain name mapping. The standard library ``logging`` module has a finer
set of levels; table B maps ``DEBUG`` onto :data:`FINEST`, the lowest level we
register with it, so that a debug run lets every record through.
"""

from __future__ import annotations

import enum
import logging
from types import MappingProxyType

# Lowest positive stdlib level. 0 is NOTSET, which loggers read as "inherit".
FINEST = 1
logging.addLevelName(FINEST, "FINEST")

_ALIASES = {"WARN": "WARNING"}


class VerbosityLevel(enum.Enum):
    """Canonical verbosity levels, ordered from least to most verbose."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"

    @property
    def rank(self) -> int:
        """Position in the verbosity order; ``ERROR`` is 0."""
        return _ORDER.index(self)

    @classmethod
    def from_name(cls, name: str) -> "VerbosityLevel":
        """Parse a level name case-insensitively (``warn`` is accepted)."""
        key = str(name).strip().upper()
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(level.name for level in cls)
            raise ValueError(f"Unknown verbosity '{name}'. Choose one of: {choices}.") from None

    def __str__(self) -> str:
        return self.name


_ORDER = tuple(VerbosityLevel)

# Table A: toolkit level <-> loguru level name.
LOGURU_LEVELS = MappingProxyType(
    {
        VerbosityLevel.ERROR: "ERROR",
        VerbosityLevel.WARNING: "WARNING",
        VerbosityLevel.INFO: "INFO",
        VerbosityLevel.DEBUG: "DEBUG",
    }
)

# Table B: toolkit level <-> stdlib logging level number.
STDLIB_LEVELS = MappingProxyType(
    {
        VerbosityLevel.ERROR: logging.ERROR,
        VerbosityLevel.WARNING: logging.WARNING,
        VerbosityLevel.INFO: logging.INFO,
        VerbosityLevel.DEBUG: FINEST,
    }
)

_LOGURU_INVERSE = MappingProxyType({value: key for key, value in LOGURU_LEVELS.items()})
_STDLIB_INVERSE = MappingProxyType({value: key for key, value in STDLIB_LEVELS.items()})


def level_to_loguru_level(verbosity: VerbosityLevel) -> str:
    return LOGURU_LEVELS[verbosity]


def level_from_loguru_level(loguru_level) -> VerbosityLevel | None:
    """Return the toolkit level for a loguru level name or ``Level`` record.

    Returns ``None`` for loguru levels with no toolkit counterpart (``TRACE``,
    ``SUCCESS``, ``CRITICAL``).
    """
    name = getattr(loguru_level, "name", loguru_level)
    return _LOGURU_INVERSE.get(name)


def level_to_stdlib_level(verbosity: VerbosityLevel) -> int:
    return STDLIB_LEVELS[verbosity]


def level_from_stdlib_level(stdlib_level: int) -> VerbosityLevel | None:
    return _STDLIB_INVERSE.get(stdlib_level)
