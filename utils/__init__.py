"""
Utilities module for Factory Issue Dashboard.
"""
from .logger import logger, init_logging, setup_logging

__all__ = ["logger", "init_logging", "setup_logging"]
