"""Greeting service exporting an access counter to Prometheus."""

__version__ = "0.1.0"
