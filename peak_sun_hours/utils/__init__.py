"""
utils module - shared helpers

This module contains the following utilities:
- formatting: fixed-point number formatting
- logging_setup: application logging configuration
"""

from .formatting import format_value, format_coordinate
from .logging_setup import configure_logging

__version__ = "1.0.0"
__author__ = "Peak Sun Hours Team"

__all__ = [
    'format_value',
    'format_coordinate',
    'configure_logging'
]
