"""Shared models and services for the user registry."""
