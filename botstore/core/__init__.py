"""
Core utilities and configuration for botstore.

This package provides core functionality including logging configuration,
settings and database setup.
"""

from botstore.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
