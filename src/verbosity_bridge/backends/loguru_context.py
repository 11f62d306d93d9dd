#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Live level configuration for loguru sinks.

Loguru has no logger hierarchy of its own: every sink carries its level
filter, and a dict filter is frozen when the sink is added. ``LoguruContext``
keeps a small table of per-name logger configs (the root config is keyed by
``""``) together with the sinks it manages, and re-adds those sinks whenever
:meth:`LoguruContext.update_loggers` is called so the current table applies.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from types import MappingProxyType

from loguru import logger as loguru_logger

logger = logging.getLogger(__name__)

ROOT = ""
DEFAULT_LEVEL = "INFO"


@dataclass
class LoggerConfig:
    """Level setting for one dotted logger name."""

    name: str
    level: str = DEFAULT_LEVEL

    def set_level(self, level: str) -> None:
        self.level = level


@dataclass
class SinkSpec:
    """A sink registered with the context and the options it is added with."""

    sink: object
    options: dict = field(default_factory=dict)
    handler_id: int | None = None


class LoguruContext:
    """Own a set of loguru sinks and the level table that filters them.

    Parameters
    ----------
    log: loguru logger
        The loguru logger to configure. Defaults to ``loguru.logger``.
    console: sink or None
        Sink installed as the managed console output. ``None`` skips it.
    remove_default: bool
        Remove every handler already present on ``log`` before installing
        the managed sinks (this drops loguru's own default stderr handler).
    """

    def __init__(self, log=None, console=sys.stderr, remove_default=True):
        self._log = log if log is not None else loguru_logger
        self._configs = {ROOT: LoggerConfig(ROOT)}
        self._sinks: list[SinkSpec] = []
        if remove_default:
            self._log.remove()
        if console is not None:
            self.add_root_sink(console)

    @property
    def root(self) -> LoggerConfig:
        return self._configs[ROOT]

    @property
    def sinks(self):
        return tuple(self._sinks)

    @property
    def logger_configs(self):
        return MappingProxyType(self._configs)

    def get_logger_config(self, name: str) -> LoggerConfig:
        """Return the config for ``name`` or its nearest configured ancestor."""
        candidate = name or ROOT
        while candidate:
            if candidate in self._configs:
                return self._configs[candidate]
            candidate = candidate.rpartition(".")[0]
        return self.root

    def add_logger_config(self, name: str, level: str = DEFAULT_LEVEL) -> LoggerConfig:
        config = self._configs.get(name)
        if config is None:
            config = LoggerConfig(name, level)
            self._configs[name] = config
        else:
            config.set_level(level)
        return config

    def level_filter(self) -> dict:
        """Build the loguru dict filter for the current level table."""
        return {name: config.level for name, config in self._configs.items()}

    def add_root_sink(self, sink, **options) -> int:
        """Add ``sink`` under the root config and keep it managed.

        ``options`` are passed to ``logger.add`` on every (re-)add; ``level``
        and ``filter`` are owned by the context and must not be given.
        """
        spec = SinkSpec(sink, dict(options))
        spec.handler_id = self._add(spec)
        self._sinks.append(spec)
        logger.debug("Added loguru sink %r with handler id %d.", sink, spec.handler_id)
        return spec.handler_id

    def update_loggers(self) -> None:
        """Re-add every managed sink so the current level table applies."""
        for spec in self._sinks:
            if spec.handler_id is not None:
                self._log.remove(spec.handler_id)
                spec.handler_id = None
            spec.handler_id = self._add(spec)
        logger.debug("Refreshed %d loguru sink(s) with filter %s.", len(self._sinks), self.level_filter())

    def close(self) -> None:
        """Remove every managed sink from loguru."""
        for spec in self._sinks:
            if spec.handler_id is not None:
                self._log.remove(spec.handler_id)
                spec.handler_id = None
        self._sinks = []

    def _add(self, spec: SinkSpec) -> int:
        # "TRACE" lets the dict filter alone decide what passes.
        return self._log.add(spec.sink, level="TRACE", filter=self.level_filter(), **spec.options)


_context: LoguruContext | None = None


def get_context() -> LoguruContext:
    """Return the process-wide context, creating it on first use."""
    global _context
    if _context is None:
        _context = LoguruContext()
        logger.debug("Created the process-wide loguru context.")
    return _context


def reset_context() -> None:
    """Close the process-wide context's sinks and forget it."""
    global _context
    if _context is not None:
        _context.close()
    _context = None
