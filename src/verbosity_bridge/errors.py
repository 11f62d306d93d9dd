#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Exceptions raised by verbosity-bridge."""


class VerbosityBridgeError(Exception):
    """Base class for errors raised by this package."""


class UnimplementedLevelError(VerbosityBridgeError):
    """Raised when a verbosity value has no mapping onto a backend."""

    def __init__(self, verbosity):
        self.verbosity = verbosity
        super().__init__(f"This log level is not implemented properly: {verbosity!r}")
