"""Logging backends driven by the propagator."""
