"""User registry HTTP API and console front ends."""

__version__ = "0.1.0"
