"""
web module - Flask web application

This module contains the following components:
- app: Flask application factory
- routes: URL routing modules
- templates: HTML templates
"""

from .app import create_app, get_session

__version__ = "1.0.0"
__author__ = "Peak Sun Hours Team"

__all__ = [
    'create_app',
    'get_session'
]
