#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Toolkit-wide log facade.

A single global verbosity is shared by every ``Log`` instance; messages at or
below that verbosity are written as tab-separated lines to a print stream.
"""

from __future__ import annotations

import sys
import time

from ..core.levels import VerbosityLevel


class Log:
    """Named logger writing ``LEVEL<TAB>timestamp<TAB>name<TAB>message`` lines."""

    _global_level = VerbosityLevel.INFO
    _print_stream = None

    def __init__(self, name: str):
        self.name = name

    @classmethod
    def get_instance(cls, source) -> "Log":
        """Return a ``Log`` named after a string, class, or object."""
        if isinstance(source, str):
            return cls(source)
        if not isinstance(source, type):
            source = type(source)
        return cls(source.__name__)

    @classmethod
    def set_global_log_level(cls, level: VerbosityLevel) -> None:
        cls._global_level = level

    @classmethod
    def get_global_log_level(cls) -> VerbosityLevel:
        return cls._global_level

    @classmethod
    def set_global_print_stream(cls, stream) -> None:
        """Send output to ``stream``; ``None`` restores ``sys.stderr``."""
        cls._print_stream = stream

    @classmethod
    def is_enabled(cls, level: VerbosityLevel) -> bool:
        return level.rank <= cls._global_level.rank

    def error(self, *messages) -> None:
        self._emit(VerbosityLevel.ERROR, messages)

    def warn(self, *messages) -> None:
        self._emit(VerbosityLevel.WARNING, messages)

    def info(self, *messages) -> None:
        self._emit(VerbosityLevel.INFO, messages)

    def debug(self, *messages) -> None:
        self._emit(VerbosityLevel.DEBUG, messages)

    def _emit(self, level: VerbosityLevel, messages) -> None:
        if not self.is_enabled(level):
            return
        stream = self._print_stream if self._print_stream is not None else sys.stderr
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        text = "".join(str(part) for part in messages)
        stream.write(f"{level.name}\t{timestamp}\t{self.name}\t{text}\n")
