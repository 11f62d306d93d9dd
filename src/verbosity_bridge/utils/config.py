#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Read the logging settings from the environment or an INI file."""

import configparser
import logging
import os

from ..core.levels import VerbosityLevel

logger = logging.getLogger(__name__)

SECTION = "logging"
VERBOSITY_ENV = "VERBOSITY_BRIDGE_VERBOSITY"
LOG_FILE_ENV = "VERBOSITY_BRIDGE_LOG_FILE"
DEFAULT_VERBOSITY = VerbosityLevel.INFO


def get_logging_config(config_path=None):
    """
    Retrieve the verbosity and log file to apply.

    Environment variables take precedence over the ``[logging]`` section of
    the configuration file; missing values fall back to ``INFO`` and no file.

    Parameters:
    - config_path (str or None): Path to an INI file with a ``[logging]`` section.

    Returns:
    - dict: ``{"verbosity": VerbosityLevel, "log_file": str or None}``.
    """
    config = configparser.ConfigParser()
    if config_path:
        read = config.read(config_path)
        if not read:
            logger.warning(f"Configuration file {config_path} not found; using defaults.")

    verbosity = os.environ.get(VERBOSITY_ENV) or config.get(SECTION, "verbosity", fallback=None)
    log_file = os.environ.get(LOG_FILE_ENV) or config.get(SECTION, "log_file", fallback=None)

    logging_config = {
        "verbosity": VerbosityLevel.from_name(verbosity) if verbosity else DEFAULT_VERBOSITY,
        "log_file": log_file or None,
    }

    logger.debug(f"Fetched logging configuration from {config_path or 'the environment'}.")
    return logging_config
