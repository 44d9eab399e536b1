"""
Flask application factory
"""
import uuid

from flask import Flask, session as browser_session

from peak_sun_hours.config import get_config
from peak_sun_hours.core import create_session
from peak_sun_hours.utils.logging_setup import configure_logging

EXTENSION_KEY = 'peak_sun_hours'
SESSION_ID_KEY = 'report_session_id'


class SessionStore:
    """Report sessions keyed by browser session id"""

    def __init__(self, factory):
        self.factory = factory
        self.sessions = {}

    def get(self, session_id):
        if session_id not in self.sessions:
            self.sessions[session_id] = self.factory()
        return self.sessions[session_id]

    def __len__(self):
        return len(self.sessions)


def create_app(config_name=None, session_factory=None):
    """Create and configure the Flask app"""
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    configure_logging(app.config['LOG_LEVEL'])

    # One report session per browser
    factory = session_factory or (lambda: create_session(config_class))
    app.extensions[EXTENSION_KEY] = SessionStore(factory)

    # Register routes
    from peak_sun_hours.web.routes import register_all_blueprints
    register_all_blueprints(app)

    app.logger.info("Peak sun hours app created (%s), PVGIS at %s",
                    app.config['FLASK_ENV'], app.config['PVGIS_BASE_URL'])
    return app


def get_session(app):
    """Report session of the browser making the current request"""
    session_id = browser_session.get(SESSION_ID_KEY)
    if session_id is None:
        session_id = uuid.uuid4().hex
        browser_session[SESSION_ID_KEY] = session_id
    return app.extensions[EXTENSION_KEY].get(session_id)
