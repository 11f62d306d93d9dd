#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Minimal level switch for the record serialization layer.

The serialization code only asks "is this level on?" before formatting a
message, so the whole configuration surface is one setter per level.
"""

import logging

LEVEL_TRACE = 1
LEVEL_DEBUG = 2
LEVEL_INFO = 3
LEVEL_WARN = 4
LEVEL_ERROR = 5
LEVEL_NONE = 6

_NAMES = {
    LEVEL_TRACE: "TRACE",
    LEVEL_DEBUG: "DEBUG",
    LEVEL_INFO: "INFO",
    LEVEL_WARN: "WARN",
    LEVEL_ERROR: "ERROR",
    LEVEL_NONE: "NONE",
}

# Forwarded records carry the serialization level as the stdlib level.
_STDLIB = {
    LEVEL_TRACE: logging.DEBUG,
    LEVEL_DEBUG: logging.DEBUG,
    LEVEL_INFO: logging.INFO,
    LEVEL_WARN: logging.WARNING,
    LEVEL_ERROR: logging.ERROR,
}

logger = logging.getLogger("verbosity_bridge.serialization")

level = LEVEL_INFO


def set_level(new_level: int) -> None:
    global level
    if new_level not in _NAMES:
        raise ValueError(f"Invalid serialization log level: {new_level}")
    level = new_level


def get_level_name() -> str:
    return _NAMES[level]


def is_enabled(message_level: int) -> bool:
    return message_level >= level


def set_none():
    set_level(LEVEL_NONE)


def set_error():
    set_level(LEVEL_ERROR)


def set_warn():
    set_level(LEVEL_WARN)


def set_info():
    set_level(LEVEL_INFO)


def set_debug():
    set_level(LEVEL_DEBUG)


def set_trace():
    set_level(LEVEL_TRACE)


def _log(message_level, message):
    if is_enabled(message_level):
        logger.log(_STDLIB[message_level], "%s: %s", _NAMES[message_level], message)


def error(message):
    _log(LEVEL_ERROR, message)


def warn(message):
    _log(LEVEL_WARN, message)


def info(message):
    _log(LEVEL_INFO, message)


def debug(message):
    _log(LEVEL_DEBUG, message)


def trace(message):
    _log(LEVEL_TRACE, message)
