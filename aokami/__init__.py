"""Download game server jars, run their data generator and transform its output into JSON."""

__version__ = "0.1.0"