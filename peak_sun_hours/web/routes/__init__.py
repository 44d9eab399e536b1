"""
web.routes module - Flask routes

This module contains the following routes:
- main_routes: main page and form actions
- api_routes: REST API endpoints
- download_routes: PDF and data downloads
"""

from .main_routes import main_bp
from .api_routes import api_bp
from .download_routes import download_bp

# All blueprints
all_blueprints = [
    (main_bp, {}),  # (blueprint, options)
    (api_bp, {'url_prefix': '/api'}),
    (download_bp, {'url_prefix': '/download'})
]


def register_all_blueprints(app):
    """Register every blueprint on the Flask app"""
    for blueprint, options in all_blueprints:
        app.register_blueprint(blueprint, **options)

    app.logger.debug("%d blueprints registered", len(all_blueprints))


__all__ = [
    'main_bp',
    'api_bp',
    'download_bp',
    'all_blueprints',
    'register_all_blueprints'
]
