"""Diagnostics plumbing for the load sensor."""

from .logging import configure_logging

__all__ = ["configure_logging"]
