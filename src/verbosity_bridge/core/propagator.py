#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Propagate one verbosity level to every logging backend used by the toolkit.

Toolkit code uses :class:`~verbosity_bridge.core.levels.VerbosityLevel` for
verbosity arguments. Several dependencies log through their own machinery, so
a single request has to reach four places: the toolkit ``Log`` facade, loguru,
the standard library root logger, and the serialization layer's level switch.
"""

from __future__ import annotations

import logging
import sys

from ..backends import serialization_log as default_serialization_log
from ..backends.loguru_context import get_context
from ..backends.toolkit_log import Log
from ..errors import UnimplementedLevelError
from .levels import VerbosityLevel, level_to_loguru_level, level_to_stdlib_level

logger = logging.getLogger(__name__)

PATTERN_STRING = "{level: <5} {time:HH:mm:ss,SSS} {module} - {message}"
SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _is_console_handler(handler: logging.Handler) -> bool:
    # FileHandler subclasses StreamHandler.
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


class VerbosityPropagator:
    """Apply verbosity and log-file settings to a set of backend handles.

    Every handle defaults to the live, process-wide instance. Tests pass
    their own so they can assert on the calls made.

    Parameters:
    - loguru_context: a ``LoguruContext``, or ``None`` to look up the live one.
    - root_logger (logging.Logger): stdlib logger treated as the root.
    - toolkit_log: object exposing ``set_global_log_level``.
    - serialization_log: object exposing ``set_debug``/``set_info``/``set_warn``/``set_error``.
    """

    def __init__(self, loguru_context=None, root_logger=None, toolkit_log=Log, serialization_log=None):
        self._loguru_context = loguru_context
        self._root_logger = root_logger
        self.toolkit_log = toolkit_log
        self.serialization_log = serialization_log or default_serialization_log

    @property
    def loguru_context(self):
        return self._loguru_context if self._loguru_context is not None else get_context()

    @property
    def root_logger(self) -> logging.Logger:
        return self._root_logger if self._root_logger is not None else logging.getLogger("")

    def set_logging_level(self, verbosity: VerbosityLevel) -> None:
        """Propagate ``verbosity`` to the toolkit log, loguru, stdlib logging and the serialization log."""
        self.toolkit_log.set_global_log_level(verbosity)
        self.set_loguru_logging_level(verbosity)
        self.set_stdlib_logging_level(verbosity)
        self.set_serialization_logging_level(verbosity)
        logger.debug("Logging level set to %s on all backends.", verbosity)

    def set_loguru_logging_level(self, verbosity: VerbosityLevel) -> None:
        context = self.loguru_context
        config = context.get_logger_config(__name__)
        config.set_level(level_to_loguru_level(verbosity))
        context.update_loggers()

    def set_stdlib_logging_level(self, verbosity: VerbosityLevel) -> None:
        """Set the stdlib root logger and all of its handlers to the mapped level.

        A console handler is added first when the root logger has none, so
        the level always has at least one output to act on.
        """
        root = self.root_logger
        if not any(_is_console_handler(handler) for handler in root.handlers):
            root.addHandler(logging.StreamHandler())
            logger.debug("Added a console handler to the root logger.")

        level = level_to_stdlib_level(verbosity)
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)

    def set_serialization_logging_level(self, verbosity: VerbosityLevel) -> None:
        log = self.serialization_log
        if verbosity is VerbosityLevel.DEBUG:
            log.set_debug()
        elif verbosity is VerbosityLevel.INFO:
            log.set_info()
        elif verbosity is VerbosityLevel.WARNING:
            log.set_warn()
        elif verbosity is VerbosityLevel.ERROR:
            log.set_error()
        else:
            raise UnimplementedLevelError(verbosity)

    def set_logging_file(self, file_name: str | None) -> list[str]:
        """
        Send loguru and stdlib logging output to ``file_name`` as well.

        Parameters:
        - file_name (str or None): Path of the log file; ``None`` does nothing.

        Returns:
        - list: Warning messages for backends that could not open the file.
        """
        warnings = []
        if not file_name:
            return warnings

        try:
            self.set_loguru_logging_file(file_name)
        except OSError as e:
            warnings.append(self._report_file_failure(file_name, "loguru", e))

        warning = self.set_stdlib_logging_file(file_name)
        if warning:
            warnings.append(warning)
        return warnings

    def set_loguru_logging_file(self, file_name: str) -> int:
        """Append loguru output to ``file_name``; returns the loguru handler id.

        The file is opened on the first record written, so the sink stays
        attached even when the path cannot be opened yet.
        """
        handler_id = self.loguru_context.add_root_sink(
            file_name, format=PATTERN_STRING, mode="a", delay=True
        )
        logger.debug("Sending loguru output to %s.", file_name)
        return handler_id

    def set_stdlib_logging_file(self, file_name: str) -> str | None:
        """Add a file handler for ``file_name`` to the stdlib root logger.

        An unwritable path is reported on stderr and returned as a warning
        message instead of being raised.
        """
        try:
            file_handler = logging.FileHandler(file_name)
        except OSError as e:
            return self._report_file_failure(file_name, "the logging module", e)

        file_handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))
        self.root_logger.addHandler(file_handler)
        logger.debug("Sending stdlib logging output to %s.", file_name)
        return None

    @staticmethod
    def _report_file_failure(file_name, backend, error) -> str:
        message = f"Could not send log to {file_name} for {backend}: {error}"
        print(message, file=sys.stderr)
        logger.warning(message)
        return message


_default = VerbosityPropagator()


def set_logging_level(verbosity: VerbosityLevel) -> None:
    """Propagate ``verbosity`` to every live logging backend."""
    _default.set_logging_level(verbosity)


def set_logging_file(file_name: str | None) -> list[str]:
    """Send live loguru and stdlib logging output to ``file_name`` if given."""
    return _default.set_logging_file(file_name)
