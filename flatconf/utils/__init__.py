"""Utility modules for flatconf."""

from flatconf.utils.logging_utils import setup_logging

__all__ = ["setup_logging"]
