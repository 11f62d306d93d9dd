#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Command-line interface for verbosity-bridge."""

import argparse
import logging

from loguru import logger as loguru_logger

from .backends import serialization_log
from .backends.toolkit_log import Log
from .core.levels import LOGURU_LEVELS, STDLIB_LEVELS, VerbosityLevel
from .core.propagator import set_logging_file, set_logging_level
from .utils.config import get_logging_config
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_MESSAGE = "verbosity-bridge sample at {}"

# Emitter names shared by the toolkit Log and the serialization log.
_EMITTERS = {
    VerbosityLevel.ERROR: "error",
    VerbosityLevel.WARNING: "warn",
    VerbosityLevel.INFO: "info",
    VerbosityLevel.DEBUG: "debug",
}


def emit_samples() -> None:
    """Log one message per level through every backend."""
    toolkit_log = Log.get_instance(__name__)
    for level in VerbosityLevel:
        message = SAMPLE_MESSAGE.format(level.name)
        getattr(toolkit_log, _EMITTERS[level])(message)
        loguru_logger.log(LOGURU_LEVELS[level], message)
        logger.log(STDLIB_LEVELS[level], message)
        getattr(serialization_log, _EMITTERS[level])(message)


def handle_apply(args: argparse.Namespace) -> list:
    """Propagate the verbosity and log file, then emit sample messages."""
    set_logging_level(args.verbosity)
    warnings = set_logging_file(args.log_file)
    emit_samples()
    logger.info(f"Applied verbosity {args.verbosity} (log file: {args.log_file or 'none'}).")
    return warnings


def handle_levels(args: argparse.Namespace) -> list:
    """Print how each verbosity maps onto the backend levels."""
    print(f"{'verbosity':<10}{'loguru':<10}{'logging':<10}")
    for level in VerbosityLevel:
        stdlib_name = logging.getLevelName(STDLIB_LEVELS[level])
        print(f"{level.name:<10}{LOGURU_LEVELS[level]:<10}{stdlib_name:<10}")
    return []


def get_args(argv=None):
    """Build the CLI parser and return it with the parsed arguments."""
    parser = argparse.ArgumentParser(
        description="Propagate one verbosity level to every logging backend."
    )
    parser.add_argument("--config", default=None, help="Path to an INI file with a [logging] section")
    parser.add_argument(
        "--verbosity",
        type=VerbosityLevel.from_name,
        default=None,
        help="One of ERROR, WARNING, INFO, DEBUG (overrides config and environment)",
    )
    parser.add_argument("--log-file", dest="log_file", default=None, help="Also write log output to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser(
        "apply", help="Apply the settings and emit one sample message per level."
    )
    apply_parser.set_defaults(func=handle_apply)

    levels_parser = subparsers.add_parser(
        "levels", help="Print the verbosity mapping for each backend."
    )
    levels_parser.set_defaults(func=handle_levels)

    args = parser.parse_args(argv)
    return parser, args


def initialize_args(argv=None):
    """Parse command-line arguments and fill unset options from the configuration.

    Command-line values win over the environment, which wins over the
    configuration file.

    Returns:
        argparse.Namespace: Object holding parsed command-line arguments.
    """
    parser, args = get_args(argv)

    logging_config = get_logging_config(args.config)
    if args.verbosity is None:
        args.verbosity = logging_config["verbosity"]
    if args.log_file is None:
        args.log_file = logging_config["log_file"]

    setup_logging(args.verbosity)
    for arg, value in vars(args).items():
        logger.debug(f"Argument {arg} = {value}")

    return args


def main(argv=None):
    """Entry point for the ``verbosity-bridge`` command."""
    args = initialize_args(argv)
    args.func(args)
    return args


if __name__ == "__main__":
    main()
