"""
Logger module for memberwise.

This module provides a centralized logger that can be imported throughout the package
without causing circular import issues.
"""

import logging

# Module-level logger
logger: logging.Logger = logging.getLogger('memberwise')
logger.setLevel(logging.WARNING)  # Default to WARNING level, registration chatter is DEBUG

def set_logger(custom_logger: logging.Logger) -> None:
    """Allow users to provide their own logger."""
    global logger
    logger = custom_logger

def get_logger() -> logging.Logger:
    """Return the logger currently in use (the custom one, if set_logger was called)."""
    return logger

def set_log_level(level: int) -> None:
    """Set the logging level for the module. 
    
    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    logger.setLevel(level)
