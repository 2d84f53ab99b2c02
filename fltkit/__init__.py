"""Buffered binary I/O, hierarchy record layouts and container utilities for OpenFlight files."""

__version__ = "0.9.1"