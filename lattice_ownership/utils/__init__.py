"""Utility modules for Lattice tag ownership."""

from .logging_config import configure_logging

__all__ = ["configure_logging"]
