"""Shared helpers: geodesy and coordinate checks."""
