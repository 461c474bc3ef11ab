"""Sweepfield – a pygame front end for a grid mine puzzle."""

__version__ = "0.1.0"
