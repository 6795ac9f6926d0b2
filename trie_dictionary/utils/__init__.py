"""Shared helpers: logging, metrics, configuration."""
