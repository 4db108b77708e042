"""
Core models and configuration for sqlserver_builds.

This package provides the build-metadata domain models together with the
logging and settings plumbing shared by the rest of the package.
"""

from sqlserver_builds.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
