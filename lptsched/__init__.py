"""Tick-based LPT scheduling of autonomous-car modules across GPUs, with a text report, a command line and a window front end."""

__version__ = "0.1.0"