"""Shared utilities."""

from .logger import setup_logging
from .random_source import RandomSource

__all__ = ["RandomSource", "setup_logging"]
