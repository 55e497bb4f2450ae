"""Percent-encoding and validation helpers."""
