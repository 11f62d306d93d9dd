#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Console logging configuration for the verbosity-bridge command line."""

import logging
import logging.config

from ..core.levels import VerbosityLevel, level_to_stdlib_level

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: VerbosityLevel = VerbosityLevel.INFO) -> None:
    """Install the console handler on the root logger with ``logging.config.dictConfig``.

    Parameters
    ----------
    verbosity: VerbosityLevel
        Mapped through the stdlib level table, so ``DEBUG`` opens the root
        logger and its console handler down to ``FINEST``. Python warnings are
        routed through logging and follow the same threshold.
    """
    level = level_to_stdlib_level(verbosity)
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": CONSOLE_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
            }
        },
        "root": {"handlers": ["console"], "level": level},
    }
    logging.config.dictConfig(config)
    logging.captureWarnings(True)
