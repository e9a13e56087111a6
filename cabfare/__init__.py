"""Taxi fare estimation engine for independent cab operators."""

__version__ = "0.1.0"
